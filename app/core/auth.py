from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel
from typing import Optional

# Sem auto_error: requisições sem token seguem como sessão anônima
security = HTTPBearer(auto_error=False)


class Session(BaseModel):
    access_token: Optional[str] = None


def get_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Session:
    # O token não é validado aqui: o Supabase recusa tokens inválidos
    # (PGRST301) e o erro volta no corpo da resposta
    if credentials is None:
        return Session()
    return Session(access_token=credentials.credentials)
