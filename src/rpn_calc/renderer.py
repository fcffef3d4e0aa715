"""Text forms of a token sequence."""

from rich.text import Text

from rpn_calc.models import BraceToken, NumberToken, OperatorToken, Token

DEFAULT_STYLES = {
    "number": "green",
    "brace": "cyan",
    "operator": "yellow",
}


def render(tokens: list[Token]) -> str:
    """Space-separated literals, e.g. ``"3 4 2 * +"``."""
    return " ".join(token.literal for token in tokens)


def token_style(token: Token, styles: dict[str, str]) -> str:
    match token:
        case NumberToken():
            return styles.get("number", "")
        case BraceToken():
            return styles.get("brace", "")
        case OperatorToken():
            return styles.get("operator", "")
    return ""


def render_rich(tokens: list[Token], styles: dict[str, str] | None = None) -> Text:
    """Colored rendering for a rich Console, styled per token kind."""
    styles = styles or DEFAULT_STYLES
    text = Text()
    for i, token in enumerate(tokens):
        if i:
            text.append(" ")
        text.append(token.literal, style=token_style(token, styles))
    return text
