"""Entry formatting."""

from datetime import datetime

TIME_TOKEN = "HH:mm:ss"
TEXT_TOKEN = "{text}"


def format_entry(template: str, text: str, now: datetime | None = None) -> str:
    """Render an entry template as a Markdown list item.

    The time token is replaced before the text token, so text that happens to
    contain 'HH:mm:ss' is kept verbatim.
    """
    now = now or datetime.now()
    body = template.replace(TIME_TOKEN, now.strftime("%H:%M:%S")).replace(TEXT_TOKEN, text)
    return f"- {body}"
