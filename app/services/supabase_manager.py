# app/services/supabase_manager.py

import logging
import os
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Union

import httpx
from postgrest.exceptions import APIError
from supabase import create_client, Client

logger = logging.getLogger(__name__)

# Status HTTP que o PostgREST devolve para cada código de erro
PGRST_STATUS = {
    "PGRST000": 503,
    "PGRST001": 503,
    "PGRST002": 503,
    "PGRST003": 504,
    "PGRST116": 406,
    "PGRST200": 400,
    "PGRST201": 300,
    "PGRST202": 404,
    "PGRST203": 300,
    "PGRST204": 400,
    "PGRST205": 404,
}

SQLSTATE_STATUS = {
    "23503": 409,
    "23505": 409,
    "25006": 405,
    "42501": 403,
    "42883": 404,
    "42P01": 404,
    "P0001": 400,
}

# Classes SQLSTATE (dois primeiros caracteres)
SQLSTATE_CLASS_STATUS = {
    "08": 503,
    "09": 500,
    "0L": 403,
    "0P": 403,
    "25": 500,
    "28": 403,
    "2D": 500,
    "38": 500,
    "39": 500,
    "3B": 500,
    "40": 500,
    "53": 503,
    "54": 500,
    "55": 500,
    "57": 500,
    "58": 500,
    "F0": 500,
    "HV": 500,
    "P0": 500,
    "XX": 500,
}


def upstream_status(error: Dict[str, Any]) -> int:
    """
    Traduz o payload de erro do PostgREST para o status HTTP correspondente.
    Quando o corpo não era JSON, o cliente coloca o próprio status em `code`.
    """
    code: Union[str, int, None] = error.get("code")
    if isinstance(code, int):
        return code
    if not code:
        return 400
    code = str(code)
    if code.isdigit() and len(code) == 3:
        return int(code)

    if code.startswith("PGRST"):
        if code in PGRST_STATUS:
            return PGRST_STATUS[code]
        if code.startswith("PGRST3"):
            return 401
        if code.startswith("PGRSTX"):
            return 500
        return 400

    if code in SQLSTATE_STATUS:
        return SQLSTATE_STATUS[code]
    return SQLSTATE_CLASS_STATUS.get(code[:2], 400)


@dataclass
class QueryResult:
    """Resultado de uma consulta no formato {data, error, status}."""
    data: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[Dict[str, Any]] = None
    status: int = 200

    @property
    def ok(self) -> bool:
        return self.error is None


class SupabaseManager:
    """
    Classe para consultas ao Supabase.
    Suporta autenticação via JWT para respeitar RLS.
    """

    def __init__(
        self,
        jwt_token: Optional[str] = None,
        url: Optional[str] = None,
        anon_key: Optional[str] = None,
        client: Optional[Client] = None,
    ):
        if client is None:
            url = url or os.getenv("SUPABASE_URL")
            anon_key = anon_key or os.getenv("SUPABASE_ANON_KEY")  # chave pública (não service_role!)

            if not url or not anon_key:
                raise RuntimeError("Variáveis SUPABASE_URL e SUPABASE_ANON_KEY não configuradas no .env")

            client = create_client(url, anon_key)

        self.client: Client = client

        # Se for passado um JWT (usuário logado), ele será usado nas requisições
        if jwt_token:
            self.client.postgrest.auth(jwt_token)

    def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        ascending: bool = True,
    ) -> QueryResult:
        """Consulta registros de uma tabela; erros voltam dentro do resultado."""
        query = self.client.table(table).select("*")
        if filters:
            for col, val in filters.items():
                query = query.eq(col, val)
        if order_by:
            query = query.order(order_by, desc=not ascending)

        try:
            response = query.execute()
        except APIError as e:
            error = e.json()
            status = upstream_status(error)
            logger.warning("Supabase recusou consulta em '%s' (%s): %s", table, status, e.message)
            return QueryResult(error=error, status=status)
        except httpx.HTTPError as e:
            logger.error("Falha de comunicação com o Supabase em '%s': %s", table, e)
            return QueryResult(
                error={
                    "message": str(e),
                    "details": type(e).__name__,
                    "hint": None,
                    "code": "",
                },
                status=503,
            )

        return QueryResult(data=response.data or [], status=200)
