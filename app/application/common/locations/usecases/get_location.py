import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from app.core.config import Settings
from app.services.supabase_manager import SupabaseManager
from app.utils.number import parse_int

logger = logging.getLogger(__name__)

BAD_REQUEST = {"status": 400, "error": "Bad Request"}
INVALID_IDENTIFIER = {"status": 400, "error": "Invalid identifier"}

# Valor repassado ao filtro quando o id não é numérico (equivalente ao NaN)
NOT_A_NUMBER = "NaN"


@dataclass
class LocationLookup:
    body: Dict[str, Any]
    status_code: int = 200


def _transport_status(body: Dict[str, Any], settings: Settings) -> int:
    if not settings.mirror_upstream_status:
        return 200
    status = body.get("status")
    if isinstance(status, int) and 100 <= status <= 599:
        return status
    return 200


def _lookup(body: Dict[str, Any], settings: Settings) -> LocationLookup:
    return LocationLookup(body=body, status_code=_transport_status(body, settings))


def get_location_usecase(
    raw_id: Optional[str],
    db: Optional[SupabaseManager],
    settings: Settings,
) -> LocationLookup:
    """
    Busca uma localização pelo id.

    O corpo é sempre {data, status} ou {status, error}, nunca os dois.
    Sem linha correspondente, `data` fica de fora do corpo.
    """
    if not raw_id:
        logger.warning("Consulta de localização sem id")
        return _lookup(dict(BAD_REQUEST), settings)

    location_id = parse_int(raw_id)
    if location_id is None:
        if settings.strict_id_parsing:
            logger.warning("Id de localização inválido: %r", raw_id)
            return _lookup(dict(INVALID_IDENTIFIER), settings)
        filter_value = NOT_A_NUMBER
    else:
        filter_value = location_id

    result = db.select(
        settings.locations_table,
        filters={"id": filter_value},
        order_by="name",
        ascending=True,
    )

    if not result.ok:
        logger.warning("Erro ao buscar localização %r: status %s", raw_id, result.status)
        return _lookup({"status": result.status, "error": result.error}, settings)

    body: Dict[str, Any] = {"status": result.status}
    if result.data:
        body = {"data": result.data[0], "status": result.status}
        logger.info("Localização %s encontrada", filter_value)
    else:
        logger.info("Localização %s não encontrada", filter_value)
    return _lookup(body, settings)
