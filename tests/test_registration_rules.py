"""
Tests for supplier registration step validation.
"""

from __future__ import annotations

import pytest

from app.application.utils.registration_rules import (
    is_valid_phone,
    validate_basic_data,
    validate_complete_registration,
    validate_content,
    validate_description,
    validate_pricing,
    validate_service_type,
)
from app.domain.entities.supplier_registration import SupplierRegistration


def _complete_registration() -> SupplierRegistration:
    return SupplierRegistration(
        registration_id="r1",
        name="Ana",
        business_name="Ana Fotografia",
        phone="+244 923 456 789",
        province="Luanda",
        city="Luanda",
        service_type="Fotografia",
        event_types=("Fotógrafos",),
        description="Fotografia de casamentos e eventos corporativos em Luanda e arredores.",
        portfolio_image_count=6,
        min_price="25000",
    )


def test_phone_format():
    assert is_valid_phone("923456789")
    assert is_valid_phone("+244 923-456-789")
    assert is_valid_phone("(244) 923456789")
    assert not is_valid_phone("823456789")
    assert not is_valid_phone("92345678")


def test_basic_data():
    ok = validate_basic_data("Ana", "Ana Foto", "923456789", "Luanda", "Luanda")
    assert ok.is_valid
    assert ok.step == 1

    bad = validate_basic_data(" ", None, "123", "", "Luanda")
    assert not bad.is_valid
    assert bad.errors == [
        "Nome é obrigatório",
        "Nome do negócio é obrigatório",
        "Formato de telefone inválido",
        "Província é obrigatória",
    ]
    assert bad.step_error_message == "Passo 1 (Dados Básicos): Nome é obrigatório"


def test_service_type():
    assert validate_service_type("Fotografia", ["Drone"], category_id="photography").is_valid
    assert validate_service_type("Fotografia", ("Drone",)).is_valid

    missing = validate_service_type(None, [])
    assert missing.errors == ["Categoria principal é obrigatória", "Selecione pelo menos uma especialidade"]

    unknown = validate_service_type("Iates", ["Festas"], category_id="yachts")
    assert not unknown.is_valid
    assert "Categoria desconhecida" in unknown.errors[0]


def test_description_bounds():
    assert not validate_description(None).is_valid
    short = validate_description("curta")
    assert short.errors == ["Descrição deve ter pelo menos 50 caracteres (atual: 5)"]
    assert validate_description("x" * 50).is_valid
    assert not validate_description("x" * 501).is_valid


def test_content_bounds():
    assert validate_content(0).errors == ["Fotos são obrigatórias"]
    assert validate_content(3).errors == ["Adicione pelo menos 5 fotos (atual: 3)"]
    assert validate_content(5).is_valid
    assert validate_content(11).errors == ["Máximo de 10 fotos permitidas"]


def test_pricing():
    assert validate_pricing("1500,50").is_valid
    assert validate_pricing(None, price_on_request=True).is_valid
    assert validate_pricing("").errors == ['Preço é obrigatório ou selecione "Preço sob consulta"']
    assert validate_pricing("abc").errors == ["Preço inválido"]
    assert validate_pricing("0").errors == ["Preço inválido"]


@pytest.mark.parametrize("price", ["nan", "inf", "-inf", "1e3", "-5", "0,00", "12.", "1 500"])
def test_pricing_rejects_non_decimal_amounts(price):
    assert validate_pricing(price).errors == ["Preço inválido"]


@pytest.mark.parametrize("price", ["1500,50", "10.5", " 25000 "])
def test_pricing_accepts_decimal_amounts(price):
    assert validate_pricing(price).is_valid


def test_complete_registration_valid():
    result = validate_complete_registration(_complete_registration())
    assert result.is_valid
    assert result.step == 0
    assert result.error_summary == ""


def test_complete_registration_reports_first_failed_step():
    registration = SupplierRegistration(
        registration_id="r2",
        name="Ana",
        business_name="Ana Fotografia",
        phone="923456789",
        province="Luanda",
        city="Luanda",
    )
    result = validate_complete_registration(registration)
    assert not result.is_valid
    assert result.step == 2
    assert result.step_name == "Tipo de Serviço"
    assert "Fotos são obrigatórias" in result.errors


def test_completion_percentage():
    empty = SupplierRegistration(registration_id="r3")
    assert empty.completion_percentage == 0.0
    assert not empty.is_complete

    full = _complete_registration()
    assert full.completion_percentage == 1.0
    assert full.is_complete
