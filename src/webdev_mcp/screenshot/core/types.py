"""
Data types shared by the screenshot core.

Sample input:
    CaptureOptions.from_params(screen_id=None, timeout=0)

Expected output:
    CaptureOptions(screen_id=1, timeout=None, ...)
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from webdev_mcp.screenshot.core.constants import DEFAULT_SCREEN_ID


@dataclass(frozen=True)
class ScreenDescriptor:
    """One capturable display, valid for the current enumeration only."""

    id: int
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CaptureOptions:
    """
    Options for a single capture.

    Only ``screen_id`` and ``timeout`` are used. ``width``, ``height``,
    ``full_page`` and ``wait_for_selector`` are accepted for a browser capture
    mode and ignored.
    """

    screen_id: int = DEFAULT_SCREEN_ID
    timeout: Optional[int] = None  # milliseconds, None means unbounded
    width: Optional[int] = None
    height: Optional[int] = None
    full_page: bool = False
    wait_for_selector: Optional[str] = None

    @classmethod
    def from_params(
        cls,
        screen_id: Optional[int] = None,
        timeout: Optional[int] = None,
        **placeholders: Any,
    ) -> "CaptureOptions":
        """
        Build options from raw request parameters, applying defaults.

        Args:
            screen_id: Requested screen, defaults to the main screen
            timeout: Command timeout in milliseconds; missing or 0 means no timeout
            **placeholders: Browser capture fields (width, height, full_page,
                wait_for_selector)

        Returns:
            CaptureOptions: Normalized options
        """
        if screen_id is None:
            screen_id = DEFAULT_SCREEN_ID
        if screen_id < 0:
            raise ValueError(f"screen_id must be >= 0, got {screen_id}")
        if timeout is not None and timeout < 0:
            raise ValueError(f"timeout must be >= 0, got {timeout}")

        return cls(
            screen_id=int(screen_id),
            timeout=int(timeout) if timeout else None,
            width=placeholders.get("width"),
            height=placeholders.get("height"),
            full_page=bool(placeholders.get("full_page", False)),
            wait_for_selector=placeholders.get("wait_for_selector"),
        )

    @property
    def timeout_seconds(self) -> Optional[float]:
        if not self.timeout:
            return None
        return self.timeout / 1000
