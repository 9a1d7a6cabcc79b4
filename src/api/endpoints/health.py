from fastapi import APIRouter

SERVICE_VERSION = "1.0.0"

router = APIRouter()


@router.get("/", tags=["Health"])
async def root():
    """Health check endpoint."""
    return {
        "mensagem": "Backend da Loja da Profe funcionando!",
        "versao": SERVICE_VERSION,
        "status": "online",
    }
