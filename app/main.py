import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Dict, List, Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from config import get_settings
from payment_methods import (
    ConfigurationError,
    FormatError,
    NotConfiguredError,
    Order,
    PaymentError,
    PaymentInfo,
    PreconditionError,
    PreparedPayment,
    ReturnUrls,
    SettingsEntry,
)
from payment_methods.instapay import InstaPayPaymentMethod

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger("instapay-service")


class EndpointFilter(logging.Filter):
    """Filter out noisy health check access logs."""

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - logging filter
        return "GET /health" not in record.getMessage()


logging.getLogger("uvicorn.access").addFilter(EndpointFilter())


@lru_cache(maxsize=1)
def get_payment_method() -> InstaPayPaymentMethod:
    return InstaPayPaymentMethod()


def payment_error_to_http_status(exc: PaymentError) -> int:
    mapping = {
        FormatError: status.HTTP_400_BAD_REQUEST,
        ConfigurationError: status.HTTP_409_CONFLICT,
        PreconditionError: status.HTTP_409_CONFLICT,
        NotConfiguredError: status.HTTP_503_SERVICE_UNAVAILABLE,
    }
    for exc_type in type(exc).__mro__:
        if exc_type in mapping:
            return mapping[exc_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


# ==================== Request / response bodies ====================

class SettingsValidationRequest(BaseModel):
    locale: str = "en"
    settings: Dict[str, str] = Field(default_factory=dict)


class SettingsUpdateRequest(BaseModel):
    settings: Dict[str, str]


class ErrorsResponse(BaseModel):
    errors: List[str]


class PaymentMethodResponse(BaseModel):
    name: str
    settings: List[SettingsEntry]


class CurrencyResponse(BaseModel):
    code: str
    supported: bool


class SetupFormRequest(BaseModel):
    order: Order
    locale: str = "en"


class SetupFormResponse(BaseModel):
    form: Optional[str] = None


class SetupFormValidationRequest(SetupFormRequest):
    values: Dict[str, str] = Field(default_factory=dict)


class PreparePaymentRequest(BaseModel):
    order: Order
    locale: str = "en"
    urls: ReturnUrls
    setup_form: Optional[Dict[str, str]] = None


class PaymentStatusRequest(BaseModel):
    order: Order
    transaction_ids: List[str]


class PaymentStatusResponse(BaseModel):
    payments: List[PaymentInfo]


# FastAPI App
@asynccontextmanager
async def lifespan(app: FastAPI):
    payment_method = get_payment_method()
    payment_method.configure(settings.payment_method_settings())
    errors = payment_method.settings.validate()
    if errors:
        logger.warning("InstaPay settings are invalid: %s", errors)
    logger.info("InstaPay sandbox ready on port %s", settings.HTTP_PORT)
    yield


app = FastAPI(
    title="InstaPay Payment Method",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PaymentError)
async def payment_error_handler(request: Request, exc: PaymentError):
    code = payment_error_to_http_status(exc)
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=code, content={"detail": str(exc), "error": type(exc).__name__})


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "instapay"}


@app.get("/payment-method", response_model=PaymentMethodResponse)
async def describe_payment_method():
    payment_method = get_payment_method()
    return PaymentMethodResponse(
        name=payment_method.get_user_friendly_name(),
        settings=payment_method.get_settings_description(),
    )


@app.post("/payment-method/settings/validate", response_model=ErrorsResponse)
async def validate_settings(request: SettingsValidationRequest):
    errors = get_payment_method().validate_settings(request.locale, request.settings)
    return ErrorsResponse(errors=errors)


@app.put("/payment-method/settings", response_model=ErrorsResponse)
async def update_settings(request: SettingsUpdateRequest):
    """Reconfigure the payment method; invalid settings are stored but reported."""
    payment_method = get_payment_method()
    payment_method.configure(request.settings)
    return ErrorsResponse(errors=payment_method.settings.validate())


@app.get("/payment-method/currencies/{code}", response_model=CurrencyResponse)
async def currency_supported(code: str):
    return CurrencyResponse(code=code, supported=get_payment_method().is_currency_supported(code))


@app.post("/payments/setup-form", response_model=SetupFormResponse)
async def create_setup_form(request: SetupFormRequest):
    return SetupFormResponse(form=get_payment_method().create_setup_form(request.order, request.locale))


@app.post("/payments/setup-form/validate", response_model=ErrorsResponse)
async def validate_setup_form(request: SetupFormValidationRequest):
    errors = get_payment_method().validate_setup_form(request.order, request.locale, request.values)
    return ErrorsResponse(errors=errors)


@app.post("/payments/prepare", response_model=PreparedPayment)
async def prepare_payment(request: PreparePaymentRequest):
    return get_payment_method().prepare_payment(
        request.order, request.locale, request.urls, request.setup_form
    )


@app.post("/payments/status", response_model=PaymentStatusResponse)
async def check_payment_status(request: PaymentStatusRequest):
    payments = get_payment_method().check_payment_status(request.order, request.transaction_ids)
    return PaymentStatusResponse(payments=payments)


@app.get("/")
async def root():
    return {"message": "InstaPay Payment Method API", "payment_method": get_payment_method().get_user_friendly_name()}


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.HTTP_PORT,
        reload=True,
        log_level="info"
    )
