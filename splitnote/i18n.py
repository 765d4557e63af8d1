"""Localized strings used in the commit message preamble.

The example assistant answer in the preamble is written in the target
language, which steers the model toward answering in that language too.
"""

from pydantic import BaseModel


class Translation(BaseModel):
    """Strings for one language."""

    local_language: str
    commit_fix: str
    commit_feat: str
    commit_description: str


DEFAULT_LANGUAGE = "en"

TRANSLATIONS: dict[str, Translation] = {
    "en": Translation(
        local_language="english",
        commit_fix="fix(server.ts): change port variable case from lowercase port to uppercase PORT",
        commit_feat="feat(server.ts): add support for process.env.PORT environment variable",
        commit_description=(
            "The port variable is now named PORT, which improves consistency with the naming "
            "conventions as PORT is a constant. Support for an environment variable allows the "
            "application to be more flexible as it can now run on any available port specified "
            "via the process.env.PORT environment variable."
        ),
    ),
    "de": Translation(
        local_language="deutsch",
        commit_fix="fix(server.ts): Ändere die Groß-/Kleinschreibung der Port-Variable von port zu PORT",
        commit_feat="feat(server.ts): Füge Unterstützung für die Umgebungsvariable process.env.PORT hinzu",
        commit_description=(
            "Die Port-Variable heißt jetzt PORT, was die Konsistenz mit den Namenskonventionen "
            "verbessert, da PORT eine Konstante ist. Die Unterstützung einer Umgebungsvariable "
            "macht die Anwendung flexibler, da sie jetzt auf jedem über process.env.PORT "
            "angegebenen Port laufen kann."
        ),
    ),
    "fr": Translation(
        local_language="français",
        commit_fix="fix(server.ts): changer la casse de la variable port de port à PORT",
        commit_feat="feat(server.ts): ajouter la prise en charge de la variable d'environnement process.env.PORT",
        commit_description=(
            "La variable port s'appelle désormais PORT, ce qui respecte mieux les conventions de "
            "nommage puisque PORT est une constante. La prise en charge d'une variable "
            "d'environnement rend l'application plus flexible : elle peut maintenant tourner sur "
            "n'importe quel port indiqué par process.env.PORT."
        ),
    ),
    "es": Translation(
        local_language="español",
        commit_fix="fix(server.ts): cambiar la variable port de minúsculas a mayúsculas PORT",
        commit_feat="feat(server.ts): añadir soporte para la variable de entorno process.env.PORT",
        commit_description=(
            "La variable del puerto ahora se llama PORT, lo que mejora la coherencia con las "
            "convenciones de nombres ya que PORT es una constante. El soporte para una variable "
            "de entorno hace la aplicación más flexible, ya que ahora puede ejecutarse en "
            "cualquier puerto indicado mediante process.env.PORT."
        ),
    ),
    "pt": Translation(
        local_language="português",
        commit_fix="fix(server.ts): alterar a variável port de minúsculas para maiúsculas PORT",
        commit_feat="feat(server.ts): adicionar suporte à variável de ambiente process.env.PORT",
        commit_description=(
            "A variável da porta agora se chama PORT, o que melhora a consistência com as "
            "convenções de nomenclatura, já que PORT é uma constante. O suporte a uma variável "
            "de ambiente torna a aplicação mais flexível, pois ela pode rodar em qualquer porta "
            "definida em process.env.PORT."
        ),
    ),
    "ru": Translation(
        local_language="русский",
        commit_fix="fix(server.ts): изменить регистр переменной port на PORT",
        commit_feat="feat(server.ts): добавить поддержку переменной окружения process.env.PORT",
        commit_description=(
            "Переменная порта теперь называется PORT, что соответствует соглашениям об "
            "именовании констант. Поддержка переменной окружения делает приложение гибче: "
            "теперь его можно запускать на любом порту, заданном в process.env.PORT."
        ),
    ),
    "ja": Translation(
        local_language="日本語",
        commit_fix="fix(server.ts): ポート変数を小文字の port から大文字の PORT に変更",
        commit_feat="feat(server.ts): 環境変数 process.env.PORT のサポートを追加",
        commit_description=(
            "PORT は定数であるため、命名規則との一貫性を保つために変数名を PORT に変更しました。"
            "環境変数をサポートすることで、process.env.PORT で指定された任意のポートで"
            "アプリケーションを実行できるようになりました。"
        ),
    ),
    "zh_CN": Translation(
        local_language="简体中文",
        commit_fix="fix(server.ts)：将端口变量从小写 port 改为大写 PORT",
        commit_feat="feat(server.ts)：添加对 process.env.PORT 环境变量的支持",
        commit_description=(
            "端口变量现在命名为 PORT，因为 PORT 是常量，这与命名约定更加一致。"
            "支持环境变量使应用程序更加灵活，现在可以在 process.env.PORT 指定的任意端口上运行。"
        ),
    ),
}


def get_translation(language: str | None = None) -> Translation:
    """Get the strings for a language code.

    Args:
        language: Language code such as "en" or "zh_CN". Case-insensitive.

    Returns:
        The matching Translation, or the English one for unknown codes.
    """
    if language:
        if language in TRANSLATIONS:
            return TRANSLATIONS[language]
        lowered = language.lower()
        for code, translation in TRANSLATIONS.items():
            if code.lower() == lowered:
                return translation
    return TRANSLATIONS[DEFAULT_LANGUAGE]


def available_languages() -> list[str]:
    """Language codes that have a translation."""
    return list(TRANSLATIONS)
