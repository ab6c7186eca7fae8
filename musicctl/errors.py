from __future__ import annotations


class MusicCtlError(RuntimeError):
    pass


class TransportError(MusicCtlError):
    def __init__(self, message: str, error_name: str | None = None):
        super().__init__(message)
        # D-Bus error name, e.g. "org.freedesktop.DBus.Error.ServiceUnknown"
        self.error_name = error_name


class DecodeError(MusicCtlError):
    pass


class NoActivePlayer(MusicCtlError):
    pass
