import os
from typing import Optional

from dotenv import load_dotenv
load_dotenv()

ARTIFACT_PATH = os.getenv("ARTIFACT_PATH") or "encrypted_message.bin"
LOG_LEVEL = (os.getenv("LOG_LEVEL") or "WARNING").upper()


def get_artifact_path(override: Optional[str] = None) -> str:
    # La ruta explícita de la invocación tiene prioridad sobre el entorno.
    return override or ARTIFACT_PATH
