"""Parameter store — the user-editable values bound into command templates.

The store lives for one UI session only and is never persisted. Every setter
replaces the field unconditionally (no trimming, no validation beyond the
type) and notifies subscribed listeners so views can re-render.
"""

from __future__ import annotations

from typing import Callable

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

DEFAULT_REMOTE_ALIAS = "filelu"
DEFAULT_CREDENTIAL_PLACEHOLDER = "YOUR_FILELU_RCLONE_KEY"
DEFAULT_LOCAL_PATH = "/path/to/local/folder"
DEFAULT_REMOTE_PATH = "/backup/my-files"

ParameterListener = Callable[[str], None]


class CommandParameters(BaseModel):
    """Current values of the four command parameters."""

    model_config = ConfigDict(validate_assignment=True)

    remote_alias: str = Field(
        default=DEFAULT_REMOTE_ALIAS,
        description="Name of the rclone remote holding the FileLu connection.",
    )
    credential_placeholder: str = Field(
        default=DEFAULT_CREDENTIAL_PLACEHOLDER,
        description="Displayed key; never validated or transmitted.",
    )
    local_path: str = Field(
        default=DEFAULT_LOCAL_PATH,
        description="Local source folder for copy/sync.",
    )
    remote_path: str = Field(
        default=DEFAULT_REMOTE_PATH,
        description="Destination path on the remote.",
    )

    _listeners: list[ParameterListener] = PrivateAttr(default_factory=list)

    # -- Listeners -----------------------------------------------------------

    def subscribe(self, listener: ParameterListener) -> Callable[[], None]:
        """Register *listener* for field changes; return an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # -- Setters -------------------------------------------------------------

    def set_remote_alias(self, value: str) -> None:
        self._set("remote_alias", value)

    def set_credential_placeholder(self, value: str) -> None:
        self._set("credential_placeholder", value)

    def set_local_path(self, value: str) -> None:
        self._set("local_path", value)

    def set_remote_path(self, value: str) -> None:
        self._set("remote_path", value)

    def _set(self, field: str, value: str) -> None:
        setattr(self, field, value)
        for listener in list(self._listeners):
            listener(field)
