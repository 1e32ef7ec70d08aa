from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.routers import (
    auth_router,
    driver_router,
    transport_router,
    evaluation_criteria_router,
    driver_evaluation_router,
    driver_ranking_router,
)
from src.config.config import get_allowed_origins
from src.config.logger import setup_logging

setup_logging()

app = FastAPI(title="Fleet Evaluation API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=600,
)

main_router = APIRouter(prefix="/api")

main_router.include_router(auth_router)
main_router.include_router(driver_router)
main_router.include_router(transport_router)
main_router.include_router(evaluation_criteria_router)
main_router.include_router(driver_evaluation_router)
main_router.include_router(driver_ranking_router)

app.include_router(main_router)

@app.get("/")
async def read_root():
    return {"message": "fleet evaluation api"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
