"""Entry-point script – simply delegates to Uvicorn with the FastAPI app that
lives in the ``mybatis_log_converter`` package."""

import uvicorn

from mybatis_log_converter import config  # app object is created in package __init__


if __name__ == "__main__":
    # For development, it's recommended to use the uvicorn command directly:
    # uvicorn mybatis_log_converter:app --reload --port 5001
    uvicorn.run(
        "mybatis_log_converter:app",
        host=config.get('api', {}).get('host', "127.0.0.1"),
        port=config.get('api', {}).get('port', 5001),
        reload=config.get('api', {}).get('debug', False),
    )
