"""Base class for alert formatters."""

from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import urlencode

from django.conf import settings

from alerts.formatters.messages import ALERT_MESSAGES
from alerts.models import Alert


class BaseFormatter(ABC):
    """Turns an alert of one type into display text and a link.

    Subclasses implement format_alert() and build_show_link(). Message strings
    are loaded once by init(), which callers invoke before formatting and
    which is safe to call repeatedly.
    """

    def __init__(self, alert_type_name: str, base_url: str | None = None):
        """Initialize the formatter.

        Args:
            alert_type_name: Code of the alert type this formatter renders
            base_url: Forum base URL for links; defaults to FORUM_BASE_URL
        """
        self.alert_type_name = alert_type_name
        self._base_url = base_url
        self.messages: dict[str, str] = {}
        self._initialized = False

    @property
    def base_url(self) -> str:
        """Forum base URL without a trailing slash."""
        return (self._base_url or settings.FORUM_BASE_URL).rstrip("/")

    def init(self) -> None:
        """Load message strings on first call."""
        if self._initialized:
            return
        self.messages = self.load_messages()
        self._initialized = True

    def load_messages(self) -> dict[str, str]:
        """Return this formatter's message strings."""
        return dict(ALERT_MESSAGES.get(self.alert_type_name, {}))

    @abstractmethod
    def format_alert(self, alert: Alert, output_alert: dict[str, Any]) -> str:
        """Return the display text for an alert.

        Args:
            alert: The alert to render.
            output_alert: Rendering context (sender name, profile link, ...).
        """

    @abstractmethod
    def build_show_link(self, alert: Alert) -> str:
        """Return the absolute URL of the object the alert is about."""

    def render_message(
        self, output_alert: dict[str, Any], details: dict[str, Any] | None = None
    ) -> str:
        """Fill the type's message with the alert details and rendering context.

        Falls back to the shorter message when a placeholder is missing.
        """
        values = {**(details or {}), **output_alert}
        try:
            return self.messages["message"].format(**values)
        except KeyError:
            return self.messages["fallback"].format(**values)

    def build_url(self, path: str, fragment: str = "", **params: Any) -> str:
        """Build an absolute forum URL.

        Args:
            path: Script path relative to the forum root, e.g. "showthread.php"
            fragment: Optional fragment without the leading "#"
            **params: Query string parameters
        """
        url = f"{self.base_url}/{path}"
        if params:
            url += f"?{urlencode(params)}"
        if fragment:
            url += f"#{fragment}"
        return url
