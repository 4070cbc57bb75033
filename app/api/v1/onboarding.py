from fastapi import APIRouter, Depends, HTTPException

from app.api.v1.schemas import (
    CategoryListSchema, CategorySchema, CategoryDetailsSchema,
    SelectionSessionSchema, SelectCategoryRequestSchema, ToggleSubcategoryRequestSchema,
    ConfirmRequestSchema, ConfirmResponseSchema,
    RegistrationSchema, RegistrationUpdateSchema, RegistrationValidationSchema, StepValidationSchema,
)
from app.wiring.dependencies import (
    get_load_categories_use_case,
    get_category_details_use_case,
    get_category_selection_use_case,
    get_confirm_selection_use_case,
    get_manage_registration_use_case,
    get_selection_store,
    get_registration_store,
)
from app.application.ports.registration_store import RegistrationStorePort
from app.application.ports.selection_session_store import SelectionSessionStorePort
from app.application.use_cases.category_details import CategoryDetailsUseCase
from app.application.use_cases.category_selection import CategorySelectionUseCase
from app.application.use_cases.confirm_selection import ConfirmCategorySelectionUseCase
from app.application.use_cases.load_categories import LoadCategoriesUseCase
from app.application.use_cases.manage_registration import ManageRegistrationUseCase

# Not-found, invalid-state and invalid-subcategory errors are mapped to HTTP in app.main.
router = APIRouter()


@router.get("/categories", response_model=CategoryListSchema)
def list_categories(uc: LoadCategoriesUseCase = Depends(get_load_categories_use_case)):
    return CategoryListSchema(categories=[CategorySchema.from_entity(c) for c in uc.execute()])


@router.get("/categories/{category_id}", response_model=CategoryDetailsSchema)
def get_category(category_id: str, uc: CategoryDetailsUseCase = Depends(get_category_details_use_case)):
    details = uc.execute(category_id)
    if details is None:
        raise HTTPException(status_code=404, detail=f"Unknown category: {category_id}")
    return CategoryDetailsSchema.from_details(details)


@router.post("/selections", response_model=SelectionSessionSchema, status_code=201)
def open_selection(
    store: SelectionSessionStorePort = Depends(get_selection_store),
    uc: CategorySelectionUseCase = Depends(get_category_selection_use_case),
):
    session_id = store.create()
    state = store.get_state(session_id)
    return SelectionSessionSchema.from_state(session_id, state, uc.can_confirm(state))


@router.get("/selections/{session_id}", response_model=SelectionSessionSchema)
def get_selection(
    session_id: str,
    store: SelectionSessionStorePort = Depends(get_selection_store),
    uc: CategorySelectionUseCase = Depends(get_category_selection_use_case),
):
    state = store.get_state(session_id)
    return SelectionSessionSchema.from_state(session_id, state, uc.can_confirm(state))


@router.post("/selections/{session_id}/category", response_model=SelectionSessionSchema)
def select_category(
    session_id: str,
    req: SelectCategoryRequestSchema,
    store: SelectionSessionStorePort = Depends(get_selection_store),
    uc: CategorySelectionUseCase = Depends(get_category_selection_use_case),
    categories: LoadCategoriesUseCase = Depends(get_load_categories_use_case),
):
    state = store.get_state(session_id)
    category = categories.find(req.category_id)
    if category is None:
        raise HTTPException(status_code=404, detail=f"Unknown category: {req.category_id}")

    state = uc.select_category(state, category)
    store.set_state(session_id, state)
    return SelectionSessionSchema.from_state(session_id, state, uc.can_confirm(state))


@router.post("/selections/{session_id}/subcategories", response_model=SelectionSessionSchema)
def toggle_subcategory(
    session_id: str,
    req: ToggleSubcategoryRequestSchema,
    store: SelectionSessionStorePort = Depends(get_selection_store),
    uc: CategorySelectionUseCase = Depends(get_category_selection_use_case),
):
    state = uc.toggle_subcategory(store.get_state(session_id), req.label)
    store.set_state(session_id, state)
    return SelectionSessionSchema.from_state(session_id, state, uc.can_confirm(state))


@router.post("/selections/{session_id}/confirm", response_model=ConfirmResponseSchema)
def confirm_selection(
    session_id: str,
    req: ConfirmRequestSchema,
    store: SelectionSessionStorePort = Depends(get_selection_store),
    uc: ConfirmCategorySelectionUseCase = Depends(get_confirm_selection_use_case),
):
    result = uc.execute(store.get_state(session_id), req.registration_id)
    # A confirmed selection is finished; a failed confirm keeps the session for retry.
    store.discard(session_id)

    return ConfirmResponseSchema(
        category_name=result.snapshot.category_name,
        subcategories=list(result.snapshot.subcategories),
        registration=RegistrationSchema.from_entity(result.registration),
        validation=StepValidationSchema.from_result(result.validation),
    )


@router.delete("/selections/{session_id}", status_code=204)
def discard_selection(session_id: str, store: SelectionSessionStorePort = Depends(get_selection_store)):
    store.discard(session_id)


@router.post("/registrations", response_model=RegistrationSchema, status_code=201)
def create_registration(store: RegistrationStorePort = Depends(get_registration_store)):
    registration_id = store.create()
    return RegistrationSchema.from_entity(store.get(registration_id))


@router.get("/registrations/{registration_id}", response_model=RegistrationSchema)
def get_registration(registration_id: str, store: RegistrationStorePort = Depends(get_registration_store)):
    return RegistrationSchema.from_entity(store.get(registration_id))


@router.patch("/registrations/{registration_id}", response_model=RegistrationSchema)
def update_registration(
    registration_id: str,
    req: RegistrationUpdateSchema,
    uc: ManageRegistrationUseCase = Depends(get_manage_registration_use_case),
):
    return RegistrationSchema.from_entity(uc.update_details(registration_id, req.model_dump(exclude_unset=True)))


@router.post("/registrations/{registration_id}/reset", response_model=RegistrationSchema)
def reset_registration(
    registration_id: str,
    uc: ManageRegistrationUseCase = Depends(get_manage_registration_use_case),
):
    return RegistrationSchema.from_entity(uc.reset(registration_id))


@router.get("/registrations/{registration_id}/validation", response_model=RegistrationValidationSchema)
def validate_registration(
    registration_id: str,
    price_on_request: bool = False,
    uc: ManageRegistrationUseCase = Depends(get_manage_registration_use_case),
):
    return RegistrationValidationSchema.from_report(uc.validate(registration_id, price_on_request=price_on_request))
