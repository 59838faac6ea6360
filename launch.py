"""Serve the generated heatmap locally and open it in the browser."""

import functools
import http.server
import socketserver
import sys
import webbrowser
from pathlib import Path

PORT = 8000

# Directory of this script or executable (when frozen, e.g. PyInstaller)
SCRIPT_DIR = Path(sys.executable if getattr(sys, "frozen", False) else __file__).parent.resolve()


def _serve_root(argv: list[str]) -> Path:
    if argv:
        return Path(argv[0]).resolve()
    if (SCRIPT_DIR / "heatmap.html").is_file():
        return SCRIPT_DIR
    return SCRIPT_DIR / "archive"


def should_log(code) -> bool:
    """Only failed requests (4xx/5xx) are worth a line; unknown codes are kept."""
    if code == "-":
        return False
    try:
        return 400 <= int(code) < 600
    except (ValueError, TypeError):
        return True


class ErrorsOnlyHandler(http.server.SimpleHTTPRequestHandler):
    def log_request(self, code="-", size="-"):
        if should_log(code):
            super().log_request(code, size)


def main(argv: list[str] | None = None) -> int:
    root = _serve_root(sys.argv[1:] if argv is None else argv)
    if not (root / "heatmap.html").is_file():
        print(f"No heatmap.html in {root}. Run generate.py first.")
        return 1

    handler = functools.partial(ErrorsOnlyHandler, directory=str(root))
    try:
        with socketserver.TCPServer(("127.0.0.1", PORT), handler) as httpd:
            url = f"http://127.0.0.1:{PORT}/heatmap.html"
            print(f"Serving heatmap at {url}")
            webbrowser.open(url)
            httpd.serve_forever()
    except KeyboardInterrupt:
        print("\nShutting down server...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
