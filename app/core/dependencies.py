from fastapi import Depends

from app.core.auth import Session, get_session
from app.core.config import Settings, get_settings
from app.services.supabase_manager import SupabaseManager


def get_supabase(
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> SupabaseManager:
    # Um cliente novo por requisição, autenticado com o JWT da sessão (RLS)
    return SupabaseManager(
        jwt_token=session.access_token,
        url=settings.supabase_url,
        anon_key=settings.supabase_anon_key,
    )
