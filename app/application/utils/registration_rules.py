from __future__ import annotations

import re
from dataclasses import dataclass, field

from app.application.utils.category_rules import validate_categories
from app.domain.entities.supplier_registration import SupplierRegistration

# Angolan mobile numbers: 9 digits starting with 9, optionally prefixed by 244.
PHONE_PATTERN = re.compile(r"^(244)?9\d{8}$")
PHONE_STRIP_PATTERN = re.compile(r"[\s\-\(\)\+]")
# Plain decimal amounts only; rejects exponents, nan and inf.
PRICE_PATTERN = re.compile(r"\d+(?:\.\d+)?")

DESCRIPTION_MIN_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 500
MIN_PHOTOS = 5
MAX_PHOTOS = 10


@dataclass(frozen=True)
class RegistrationValidationResult:
    is_valid: bool
    step: int
    step_name: str
    errors: list[str] = field(default_factory=list)

    @property
    def error_summary(self) -> str:
        return "\n".join(self.errors)

    @property
    def step_error_message(self) -> str:
        if self.is_valid:
            return ""
        return f"Passo {self.step} ({self.step_name}): {self.errors[0]}"


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_phone(phone: str) -> bool:
    return PHONE_PATTERN.match(PHONE_STRIP_PATTERN.sub("", phone)) is not None


def validate_basic_data(
    name: str | None,
    business_name: str | None,
    phone: str | None,
    province: str | None,
    city: str | None,
) -> RegistrationValidationResult:
    errors: list[str] = []
    if _blank(name):
        errors.append("Nome é obrigatório")
    if _blank(business_name):
        errors.append("Nome do negócio é obrigatório")
    if phone is None or _blank(phone):
        errors.append("Telefone é obrigatório")
    elif not is_valid_phone(phone):
        errors.append("Formato de telefone inválido")
    if _blank(province):
        errors.append("Província é obrigatória")
    if _blank(city):
        errors.append("Cidade é obrigatória")
    return RegistrationValidationResult(is_valid=not errors, errors=errors, step=1, step_name="Dados Básicos")


def validate_service_type(
    category: str | None,
    subcategories: list[str] | tuple[str, ...] | None,
    category_id: str | None = None,
) -> RegistrationValidationResult:
    """
    The display name is what gets stored, so industry compatibility can only be
    checked when the caller also passes the category id.
    """
    errors: list[str] = []
    if _blank(category):
        errors.append("Categoria principal é obrigatória")
    if not subcategories:
        errors.append("Selecione pelo menos uma especialidade")
    if category_id and subcategories:
        validation = validate_categories([category_id])
        if not validation.is_valid:
            errors.append(validation.error_message or "Categoria inválida")
    return RegistrationValidationResult(is_valid=not errors, errors=errors, step=2, step_name="Tipo de Serviço")


def validate_description(
    description: str | None,
    min_length: int = DESCRIPTION_MIN_LENGTH,
    max_length: int = DESCRIPTION_MAX_LENGTH,
) -> RegistrationValidationResult:
    errors: list[str] = []
    if description is None or _blank(description):
        errors.append("Descrição é obrigatória")
    else:
        length = len(description.strip())
        if length < min_length:
            errors.append(f"Descrição deve ter pelo menos {min_length} caracteres (atual: {length})")
        if length > max_length:
            errors.append(f"Descrição não pode exceder {max_length} caracteres")
    return RegistrationValidationResult(is_valid=not errors, errors=errors, step=3, step_name="Descrição")


def validate_content(
    photo_count: int,
    min_photos: int = MIN_PHOTOS,
    max_photos: int = MAX_PHOTOS,
) -> RegistrationValidationResult:
    errors: list[str] = []
    if photo_count <= 0:
        errors.append("Fotos são obrigatórias")
    elif photo_count < min_photos:
        errors.append(f"Adicione pelo menos {min_photos} fotos (atual: {photo_count})")
    elif photo_count > max_photos:
        errors.append(f"Máximo de {max_photos} fotos permitidas")
    return RegistrationValidationResult(is_valid=not errors, errors=errors, step=4, step_name="Portfólio")


def validate_pricing(price: str | None, price_on_request: bool = False) -> RegistrationValidationResult:
    errors: list[str] = []
    if not price_on_request:
        if price is None or _blank(price):
            errors.append('Preço é obrigatório ou selecione "Preço sob consulta"')
        else:
            cleaned = price.strip().replace(",", ".")
            if not PRICE_PATTERN.fullmatch(cleaned) or float(cleaned) <= 0:
                errors.append("Preço inválido")
    return RegistrationValidationResult(is_valid=not errors, errors=errors, step=5, step_name="Preços")


def validate_registration_steps(
    registration: SupplierRegistration,
    price_on_request: bool = False,
) -> list[RegistrationValidationResult]:
    return [
        validate_basic_data(
            name=registration.name,
            business_name=registration.business_name,
            phone=registration.phone,
            province=registration.province,
            city=registration.city,
        ),
        validate_service_type(registration.service_type, registration.event_types),
        validate_description(registration.description),
        validate_content(registration.portfolio_image_count),
        validate_pricing(registration.min_price, price_on_request=price_on_request),
    ]


def validate_complete_registration(
    registration: SupplierRegistration,
    price_on_request: bool = False,
) -> RegistrationValidationResult:
    """Run every step and report all errors, pointing at the first failing step."""
    steps = validate_registration_steps(registration, price_on_request=price_on_request)

    errors: list[str] = []
    first_failed: RegistrationValidationResult | None = None
    for result in steps:
        if not result.is_valid:
            errors.extend(result.errors)
            if first_failed is None:
                first_failed = result

    return RegistrationValidationResult(
        is_valid=not errors,
        errors=errors,
        step=first_failed.step if first_failed else 0,
        step_name=first_failed.step_name if first_failed else "",
    )
