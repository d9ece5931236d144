import argparse

import uvicorn

from retail_api.config import get_settings


def parse_args():
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the retail backend API server.")
    parser.add_argument("--host", default=settings.HOST, help="Interface to bind.")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Port to listen on.")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change.",
    )
    return parser.parse_args()


def main():
    args = parse_args()
    uvicorn.run(
        "retail_api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
