import socket
from typing import List

"""Network helper utilities for the Reverse Diet Planner.

Resolves the LAN address the dev server can be reached at, so `diet.main`
can stay focused on application startup.
"""


def get_local_ip() -> str:
    """Return a non-loopback local IP address if possible, otherwise '127.0.0.1'.

    A UDP socket is "connected" to a public address so the OS picks the
    outgoing interface; no data is sent.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def server_urls(port: int) -> List[str]:
    """URLs to print at startup: localhost first, then the LAN address when there is one."""
    urls = [f"http://localhost:{port}"]
    local_ip = get_local_ip()
    if local_ip not in ("127.0.0.1", "localhost"):
        urls.append(f"http://{local_ip}:{port}")
    return urls
