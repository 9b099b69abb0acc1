"""Store connection settings and common dependencies for the API."""
import os

from dotenv import load_dotenv
from supabase import AsyncClient, AsyncClientOptions, acreate_client

from .middleware.error_handler import StoreUnavailableError
from .store import StoreClient

load_dotenv()

# Hosted store endpoint - the SUPABASE_* names are accepted for existing deployments
STORE_URL = os.environ.get("STORE_URL") or os.environ.get("SUPABASE_URL", "")
STORE_KEY = (
    os.environ.get("STORE_KEY")
    or os.environ.get("SUPABASE_ANON_KEY")
    or os.environ.get("NEXT_PUBLIC_SUPABASE_ANON_KEY", "")
)

# Request timeout in seconds (configurable via environment variable)
STORE_TIMEOUT = float(os.environ.get("STORE_TIMEOUT", "30"))

# One Supabase client per process; its PostgREST session is reused across requests
_supabase: AsyncClient | None = None


def store_configured() -> bool:
    """Check that both the store URL and key are set."""
    return bool(STORE_URL and STORE_KEY)


async def get_supabase() -> AsyncClient:
    """Create the shared Supabase client on first use."""
    global _supabase
    if _supabase is None:
        _supabase = await acreate_client(
            STORE_URL,
            STORE_KEY,
            options=AsyncClientOptions(postgrest_client_timeout=STORE_TIMEOUT),
        )
    return _supabase


async def close_supabase() -> None:
    """Close the shared client's PostgREST session, if one was opened."""
    global _supabase
    if _supabase is not None:
        await _supabase.postgrest.aclose()
        _supabase = None


async def get_store() -> StoreClient:
    """FastAPI dependency returning the store wrapper for this request."""
    if not store_configured():
        raise StoreUnavailableError("Store is not configured.")
    client = await get_supabase()
    return StoreClient(client.postgrest)
