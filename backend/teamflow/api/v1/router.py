from fastapi import APIRouter
from teamflow.api.v1.endpoints import auth, health, teams, projects, templates

api_router = APIRouter()

api_router.include_router(health.router)


# Simple health check endpoint for load balancers
@api_router.get("/health", tags=["Health"])
async def health_check():
    return {"status": "healthy", "service": "teamflow-backend"}


api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(teams.router, prefix="/teams", tags=["Teams"])
api_router.include_router(projects.router, prefix="/projects", tags=["Projects"])
api_router.include_router(templates.router, prefix="/templates", tags=["Templates"])
