# app/routers/products.py

from fastapi import APIRouter, Depends, HTTPException, Path, status

from app.core.exceptions import NotFoundError, StoreError, ValidationError
from app.core.response import success
from app.dependencies import MAX_ID, get_product_service
from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductDetailResponse,
)
from app.services.product import ProductService

router = APIRouter(
    prefix="/api/product",
    tags=["Product"],
)


@router.get("")
def get_products(
    service: ProductService = Depends(get_product_service),
):
    try:
        products = service.get_all()
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch products: {exc}",
        )

    return success(
        "Products retrieved successfully",
        [ProductResponse.model_validate(product) for product in products],
    )


@router.post("", status_code=status.HTTP_201_CREATED)
def create_product(
    product_data: ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    try:
        product = service.create(product_data)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.message,
        )
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to save product: {exc}",
        )

    return success(
        "Product created successfully",
        ProductResponse.model_validate(product),
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/{product_id}")
def get_product(
    product_id: int = Path(..., le=MAX_ID),
    service: ProductService = Depends(get_product_service),
):
    try:
        product = service.get_by_id(product_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch product: {exc}",
        )

    return success(
        "Product retrieved successfully",
        ProductDetailResponse.model_validate(product),
    )


@router.put("/{product_id}")
def update_product(
    product_data: ProductUpdate,
    product_id: int = Path(..., le=MAX_ID),
    service: ProductService = Depends(get_product_service),
):
    try:
        product = service.update(product_id, product_data)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.message,
        )
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update product: {exc}",
        )

    return success(
        "Product updated successfully",
        ProductDetailResponse.model_validate(product),
    )


@router.delete("/{product_id}")
def delete_product(
    product_id: int = Path(..., le=MAX_ID),
    service: ProductService = Depends(get_product_service),
):
    try:
        service.delete(product_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found",
        )
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete product: {exc}",
        )

    return success("Product deleted successfully")
