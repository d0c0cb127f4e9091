from fastapi import APIRouter, Depends

from blaide_api.config import EnvironmentConfig
from blaide_api.deps import get_environment_config
from blaide_api.divisions import DIVISIONS
from blaide_api.schemas.settings import DivisionsResponse, PublicConfigResponse

router = APIRouter(prefix="/api", tags=["site"])


@router.get("/divisions", response_model=DivisionsResponse)
async def get_divisions():
    """Division labels offered by the contact form"""
    return {"divisions": DIVISIONS}


@router.get("/config", response_model=PublicConfigResponse)
async def get_public_config(config: EnvironmentConfig = Depends(get_environment_config)):
    return {"mode": config.mode, "api_base_url": config.api_base_url}
