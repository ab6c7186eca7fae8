from __future__ import annotations

from musicctl.bus import BusSession

SERVICE_NAME = "org.freedesktop.Notifications"
OBJECT_PATH = "/org/freedesktop/Notifications"
INTERFACE = "org.freedesktop.Notifications"

# app_name, replaces_id, app_icon, summary, body, actions, hints, expire_timeout
NOTIFY_SIGNATURE = "susssasa{sv}i"


async def notify(
    session: BusSession,
    *,
    app_name: str,
    summary: str,
    body: str,
    icon: str = "",
    replaces_id: int = 0,
    timeout_ms: int = 0,
) -> int:
    """Show a desktop notification and return its id."""
    remote = await session.remote(SERVICE_NAME, OBJECT_PATH, INTERFACE)
    nid = await remote.call(
        "Notify",
        app_name,
        replaces_id,
        icon,
        summary,
        body,
        [],
        {},
        timeout_ms,
        signature=NOTIFY_SIGNATURE,
    )
    return int(nid)
