import os
from dataclasses import dataclass

import uvicorn
from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    reload: bool
    log_level: str

    @classmethod
    def from_env(cls) -> "ServerSettings":
        return cls(
            host=os.getenv("HOST", "127.0.0.1"),
            port=int(os.getenv("PORT", "8000")),
            reload=os.getenv("RELOAD", "false").strip().lower() in _TRUTHY,
            log_level=os.getenv("LOG_LEVEL", "info").lower(),
        )


def run() -> None:
    settings = ServerSettings.from_env()
    print(
        f"Task tracker at http://{settings.host}:{settings.port} "
        f"(ORM: {os.getenv('ORM', 'peewee')}, Reload: {settings.reload})"
    )
    uvicorn.run(
        "backend_fastapi.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()
