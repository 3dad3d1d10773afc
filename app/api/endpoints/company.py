from fastapi import APIRouter, Depends

from app.api.deps import get_company_store
from app.schemas.company import ReloadCompanyResponse
from app.services.company_store import CompanyProfileStore

router = APIRouter()


@router.post("/reload-company", response_model=ReloadCompanyResponse)
def reload_company(store: CompanyProfileStore = Depends(get_company_store)):
    profile = store.reload()
    return ReloadCompanyResponse(ok=True, loaded=profile is not None, name=profile.name if profile else None)
