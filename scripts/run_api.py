"""
Start the insights API with uvicorn on the configured host and port.
"""
import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from insights_engine.core.config import settings


def main() -> None:
    uvicorn.run("insights_engine.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=False)


if __name__ == "__main__":
    main()
