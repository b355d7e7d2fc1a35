"""
Run the API with uvicorn.

Usage: python -m jobtree
"""
import uvicorn

from jobtree.core.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run("jobtree.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
