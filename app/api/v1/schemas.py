from pydantic import BaseModel, ConfigDict, Field

from app.application.use_cases.category_details import CategoryDetails
from app.application.use_cases.manage_registration import RegistrationReport
from app.application.utils.registration_rules import RegistrationValidationResult
from app.domain.entities.category import Category
from app.domain.entities.category_selection import CategorySelectionState
from app.domain.entities.supplier_registration import SupplierRegistration


class CategorySchema(BaseModel):
    id: str
    name: str
    icon: str
    subcategories: list[str] = Field(default_factory=list)
    supplier_count: int = 0

    @classmethod
    def from_entity(cls, category: Category) -> "CategorySchema":
        return cls(
            id=category.id,
            name=category.name,
            icon=category.icon,
            subcategories=list(category.subcategories),
            supplier_count=category.supplier_count,
        )


class CategoryListSchema(BaseModel):
    categories: list[CategorySchema]


class CategoryDetailsSchema(BaseModel):
    category: CategorySchema
    industry_group: str | None = None
    industry_group_name: str | None = None
    industry_members: list[str] = Field(default_factory=list)
    compatible_categories: list[str] = Field(default_factory=list)
    incompatible_categories: list[str] = Field(default_factory=list)

    @classmethod
    def from_details(cls, details: CategoryDetails) -> "CategoryDetailsSchema":
        return cls(
            category=CategorySchema.from_entity(details.category),
            industry_group=details.industry_group,
            industry_group_name=details.industry_group_name,
            industry_members=details.industry_members,
            compatible_categories=details.compatible_categories,
            incompatible_categories=details.incompatible_categories,
        )


class SelectionSessionSchema(BaseModel):
    session_id: str
    status: str  # "unlocked" | "locked"
    locked_category: CategorySchema | None = None
    chosen_subcategories: list[str] = Field(default_factory=list)
    can_confirm: bool = False

    @classmethod
    def from_state(cls, session_id: str, state: CategorySelectionState, can_confirm: bool) -> "SelectionSessionSchema":
        return cls(
            session_id=session_id,
            status="locked" if state.is_locked else "unlocked",
            locked_category=CategorySchema.from_entity(state.locked_category) if state.locked_category else None,
            chosen_subcategories=list(state.chosen_subcategories),
            can_confirm=can_confirm,
        )


class SelectCategoryRequestSchema(BaseModel):
    category_id: str = Field(min_length=1)


class ToggleSubcategoryRequestSchema(BaseModel):
    label: str = Field(min_length=1)


class ConfirmRequestSchema(BaseModel):
    registration_id: str = Field(min_length=1)


class StepValidationSchema(BaseModel):
    is_valid: bool
    step: int
    step_name: str
    errors: list[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: RegistrationValidationResult) -> "StepValidationSchema":
        return cls(
            is_valid=result.is_valid,
            step=result.step,
            step_name=result.step_name,
            errors=list(result.errors),
        )


class RegistrationSchema(BaseModel):
    registration_id: str
    name: str | None = None
    business_name: str | None = None
    phone: str | None = None
    province: str | None = None
    city: str | None = None
    service_type: str | None = None
    event_types: list[str] = Field(default_factory=list)
    description: str | None = None
    portfolio_image_count: int = 0
    min_price: str | None = None
    max_price: str | None = None
    completion_percentage: float = 0.0
    is_complete: bool = False

    @classmethod
    def from_entity(cls, registration: SupplierRegistration) -> "RegistrationSchema":
        return cls(
            registration_id=registration.registration_id,
            name=registration.name,
            business_name=registration.business_name,
            phone=registration.phone,
            province=registration.province,
            city=registration.city,
            service_type=registration.service_type,
            event_types=list(registration.event_types),
            description=registration.description,
            portfolio_image_count=registration.portfolio_image_count,
            min_price=registration.min_price,
            max_price=registration.max_price,
            completion_percentage=registration.completion_percentage,
            is_complete=registration.is_complete,
        )


class RegistrationUpdateSchema(BaseModel):
    # The service type is only written by confirming a category selection.
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    business_name: str | None = None
    phone: str | None = None
    province: str | None = None
    city: str | None = None
    description: str | None = None
    portfolio_image_count: int | None = Field(default=None, ge=0)
    min_price: str | None = None
    max_price: str | None = None


class RegistrationValidationSchema(BaseModel):
    overall: StepValidationSchema
    steps: list[StepValidationSchema]
    is_complete: bool
    completion_percentage: float

    @classmethod
    def from_report(cls, report: RegistrationReport) -> "RegistrationValidationSchema":
        return cls(
            overall=StepValidationSchema.from_result(report.overall),
            steps=[StepValidationSchema.from_result(step) for step in report.steps],
            is_complete=report.is_complete,
            completion_percentage=report.completion_percentage,
        )



class ConfirmResponseSchema(BaseModel):
    category_name: str
    subcategories: list[str]
    registration: RegistrationSchema
    validation: StepValidationSchema
