"""
FastAPI application for the Averroez site backend.
Endpoints: /api/contact (mail relay) and /api/locale, /api/messages (i18n).
"""
from fastapi import FastAPI

from app.api.contact import router as contact_router
from app.api.locale import router as locale_router
from app.config import APP_NAME
from app.core.logger import app_logger
from app.i18n import catalog_gaps
from app.middleware.locale import LocaleMiddleware

# Create FastAPI app
app = FastAPI(
    title="Averroez Site",
    description="Contact relay and locale switching for the bilingual landing page",
    version="1.0.0",
)

app.add_middleware(LocaleMiddleware)

app.include_router(contact_router, prefix="/api", tags=["contact"])
app.include_router(locale_router, prefix="/api", tags=["i18n"])

app_logger.info("APP|startup|name=%s|routers=contact,locale", APP_NAME)

for _locale, _missing in catalog_gaps().items():
    app_logger.warning(
        "I18N|catalog_gap|locale=%s|missing=%s", _locale, ",".join(sorted(_missing))
    )


# Health check
@app.get("/")
async def root():
    return {"status": "ok", "service": "averroez-site"}


@app.get("/health")
async def health():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
