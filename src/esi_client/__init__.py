"""EVE Swagger Interface (ESI) クライアント。"""

__version__ = "0.1.0"

from esi_client.client import ESIClient, build_esi_client  # noqa: E402
from esi_client.infra.esi.dto import ESIResponse  # noqa: E402
from esi_client.shared.exceptions import ESIError  # noqa: E402

__all__ = ["ESIClient", "ESIError", "ESIResponse", "__version__", "build_esi_client"]
