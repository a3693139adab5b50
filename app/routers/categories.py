# app/routers/categories.py

from fastapi import APIRouter, Depends, HTTPException, Path, status

from app.core.exceptions import NotFoundError, StoreError
from app.core.response import success
from app.dependencies import MAX_ID, get_category_service
from app.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
)
from app.services.category import CategoryService

router = APIRouter(
    prefix="/api/category",
    tags=["Category"],
)


@router.get("")
def get_categories(
    service: CategoryService = Depends(get_category_service),
):
    try:
        categories = service.get_all()
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch categories: {exc}",
        )

    return success(
        "Categories retrieved successfully",
        [CategoryResponse.model_validate(category) for category in categories],
    )


@router.post("", status_code=status.HTTP_201_CREATED)
def create_category(
    category_data: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
):
    try:
        category = service.create(category_data)
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save category: {exc}",
        )

    return success(
        "Category created successfully",
        CategoryResponse.model_validate(category),
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/{category_id}")
def get_category(
    category_id: int = Path(..., le=MAX_ID),
    service: CategoryService = Depends(get_category_service),
):
    try:
        category = service.get_by_id(category_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch category: {exc}",
        )

    return success(
        "Category retrieved successfully",
        CategoryResponse.model_validate(category),
    )


@router.put("/{category_id}")
def update_category(
    category_data: CategoryUpdate,
    category_id: int = Path(..., le=MAX_ID),
    service: CategoryService = Depends(get_category_service),
):
    try:
        category = service.update(category_id, category_data)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update category: {exc}",
        )

    return success(
        "Category updated successfully",
        CategoryResponse.model_validate(category),
    )


@router.delete("/{category_id}")
def delete_category(
    category_id: int = Path(..., le=MAX_ID),
    service: CategoryService = Depends(get_category_service),
):
    try:
        service.delete(category_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete category: {exc}",
        )

    return success("Category deleted successfully")
