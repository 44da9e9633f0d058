import uvicorn

from report_intake.core.config import settings
from report_intake.main import app


def main():
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
