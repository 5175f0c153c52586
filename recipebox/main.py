import logging

import uvicorn
from recipebox.api.api_run import app
from recipebox.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from recipebox.utilities.network import get_local_ip


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    local_url = f"http://localhost:{APP_PORT}"
    local_ip = get_local_ip()
    lan_url = f"http://{local_ip}:{APP_PORT}"
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Uvicorn running on {local_url} (Press CTRL+C to quit)")
    # Also show the LAN-accessible URL for other devices on the same network
    if local_ip not in ("127.0.0.1", "localhost"):
        print(f"Accessible from other family devices at: {lan_url}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
