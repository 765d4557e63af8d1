"""Fixed preamble sent ahead of every diff.

The preamble is a system instruction followed by one worked example (a
user diff and the assistant's commit message). It is built once from the
configuration, and its token cost sets the budget left for the diff.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel

from splitnote.i18n import get_translation
from splitnote.tokens import count_message_tokens


class PreambleTooLargeError(ValueError):
    """Raised when the preamble alone uses up the request token limit."""

    pass


class ChatMessage(BaseModel):
    """One chat message sent to the LLM."""

    role: Literal["system", "user", "assistant"]
    content: str


SYSTEM_PROMPT_TEMPLATE = """You are to act as the author of a commit message in git. Your mission is to create clean and comprehensive commit messages in the conventional commit convention and explain WHAT were the changes and WHY the changes were done. I'll send you an output of 'git diff --staged' command, and you convert it into a commit message.
{emoji_rule}
{description_rule}
Use the present tense. The WHAT section must be 72 characters max. Use {language} to answer."""

EMOJI_RULE = "Use GitMoji convention to preface the commit."
NO_EMOJI_RULE = "Do not preface the commit with anything."
DESCRIPTION_RULE = (
    "Add a description of WHY the changes are done after the commit message. "
    "Don't start it with \"This commit\", just describe the changes."
)
NO_DESCRIPTION_RULE = "Don't add any descriptions to the commit, only commit message."

EXAMPLE_DIFF = """diff --git a/src/server.ts b/src/server.ts
index ad4db42..f3b18a9 100644
--- a/src/server.ts
+++ b/src/server.ts
@@ -10,7 +10,7 @@ import {
 initWinstonLogger();

 const app = express();
-const port = 7799;
+const PORT = 7799;

 app.use(express.json());

@@ -34,6 +34,6 @@ app.use((_, res, next) => {
 // ROUTES
 app.use(PROTECTED_ROUTER_URL, protectedRouter);

-app.listen(port, () => {
-  console.log(`Server listening on port ${port}`);
+app.listen(process.env.PORT || PORT, () => {
+  console.log(`Server listening on port ${PORT}`);
 });"""


@dataclass(frozen=True)
class PromptPreamble:
    """Read-only preamble shared by every request of a run."""

    messages: tuple[ChatMessage, ...]
    token_cost: int = field(init=False)

    def __post_init__(self) -> None:
        cost = count_message_tokens(m.model_dump() for m in self.messages)
        object.__setattr__(self, "token_cost", cost)

    def build_messages(self, diff: str) -> list[dict]:
        """Preamble messages followed by one user message holding the diff."""
        messages = [m.model_dump() for m in self.messages]
        messages.append({"role": "user", "content": diff})
        return messages

    def budget(self, max_request_tokens: int) -> int:
        """Tokens left for the diff once the preamble is accounted for.

        Raises:
            PreambleTooLargeError: If nothing is left for the diff.
        """
        remaining = max_request_tokens - self.token_cost
        if remaining <= 0:
            raise PreambleTooLargeError(
                f"The prompt preamble uses {self.token_cost} tokens, which leaves no room "
                f"for the diff under the {max_request_tokens} token request limit. "
                f"Raise max_request_tokens or disable the description option."
            )
        return remaining


def build_preamble(
    language: str = "en",
    emoji: bool = False,
    description: bool = False,
) -> PromptPreamble:
    """Build the preamble for the given message preferences.

    Args:
        language: Language code for the answer (see splitnote.i18n).
        emoji: Ask for GitMoji prefixes.
        description: Ask for a WHY paragraph after the message.

    Returns:
        The three-message preamble (system, example diff, example answer).
    """
    translation = get_translation(language)

    system = SYSTEM_PROMPT_TEMPLATE.format(
        emoji_rule=EMOJI_RULE if emoji else NO_EMOJI_RULE,
        description_rule=DESCRIPTION_RULE if description else NO_DESCRIPTION_RULE,
        language=translation.local_language,
    )

    answer_lines = [
        f"{'🐛 ' if emoji else ''}{translation.commit_fix}",
        f"{'✨ ' if emoji else ''}{translation.commit_feat}",
    ]
    if description:
        answer_lines.append(translation.commit_description)

    return PromptPreamble(
        messages=(
            ChatMessage(role="system", content=system),
            ChatMessage(role="user", content=EXAMPLE_DIFF),
            ChatMessage(role="assistant", content="\n".join(answer_lines)),
        )
    )


@lru_cache(maxsize=None)
def _cached_preamble(language: str, emoji: bool, description: bool) -> PromptPreamble:
    return build_preamble(language=language, emoji=emoji, description=description)


def get_default_preamble() -> PromptPreamble:
    """Preamble for the active configuration, built once per process."""
    from splitnote import config

    return _cached_preamble(config.LANGUAGE, config.EMOJI, config.DESCRIPTION)
