"""Run the API with uvicorn."""

import uvicorn

from meteoquery.core.config import settings

if __name__ == "__main__":
    uvicorn.run("meteoquery:app", host=settings.host, port=settings.port, reload=False)
