import logging

import uvicorn
from diet.api.api_run import app
from diet.utilities.config import APP_HOST, APP_PORT, DEBUG
from diet.utilities.network import server_urls


def run():
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    local_url, *lan_urls = server_urls(APP_PORT)
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Uvicorn running on {local_url} (Press CTRL+C to quit)")
    for url in lan_urls:
        print(f"Accessible from other devices at: {url}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)


if __name__ == "__main__":
    run()
