# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar el almacén y recargar la configuración.
# --------------------------------------------------------------

import importlib
from typing import Callable, Iterator

import pytest


@pytest.fixture(autouse=True)
def _isolate_artifact(tmp_path, monkeypatch) -> Iterator[None]:
    """Aísla ARTIFACT_PATH y recarga symkey.config para cada prueba.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    data_dir = tmp_path / "_data"
    data_dir.mkdir()
    monkeypatch.setenv("ARTIFACT_PATH", str(data_dir / "encrypted_message.bin"))

    import symkey.config as config_module

    importlib.reload(config_module)

    yield
    # tmp_path se limpia automáticamente por pytest


@pytest.fixture
def artifact_path(tmp_path) -> str:
    """Ruta del artefacto configurada por el fixture de aislamiento."""
    return str(tmp_path / "_data" / "encrypted_message.bin")


@pytest.fixture
def seeded_rng() -> Callable[[int], bytes]:
    """Fuente aleatoria determinista para reproducir nonces generados."""

    def _rng(size: int) -> bytes:
        return bytes((7 * i + 3) % 256 for i in range(size))

    return _rng
