from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ._format import payload_repr


@dataclass(slots=True)
class Config:
    """Process-wide display settings for containers.

    Attributes are read each time a container is rendered, so changes apply immediately.

    Args:
        repr_depth (int): Maximum nesting level shown for container payloads.
        repr_width (int): Line width passed to the pretty printer.
        repr_max_length (int): Payload reprs longer than this are truncated with `...`.

    Example:
    ```python
    >>> import optionchain as oc
    >>> cfg = oc.get_config()
    >>> previous = cfg.repr_max_length
    >>> cfg.repr_max_length = 5
    >>> oc.Some("abcdefghij")
    Some('abcd...)
    >>> cfg.repr_max_length = previous

    ```
    """

    repr_depth: int = 3
    repr_width: int = 80
    repr_max_length: int = 200

    def payload_repr(self, value: Any) -> str:
        """Format a payload for display according to the current settings.

        Args:
            value (Any): The payload to format.

        Returns:
            str: The formatted payload.

        Example:
        ```python
        >>> import optionchain as oc
        >>> oc.Config().payload_repr({"a": [1, 2]})
        "{'a': [1, 2]}"
        >>> oc.Config(repr_depth=1).payload_repr({"a": [1, 2]})
        "{'a': [...]}"

        ```
        """
        return payload_repr(
            value,
            max_length=self.repr_max_length,
            depth=self.repr_depth,
            width=self.repr_width,
        )


_CONFIG = Config()


def get_config() -> Config:
    """Return the shared `Config` instance.

    Returns:
        Config: The configuration used by every container repr.

    Example:
    ```python
    >>> import optionchain as oc
    >>> oc.get_config() is oc.get_config()
    True

    ```
    """
    return _CONFIG
