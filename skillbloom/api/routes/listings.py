from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from skillbloom.database import get_db
from skillbloom.models.listing import Listing
from skillbloom.models.user import User
from skillbloom.routers.dependencies import require_homemaker
from skillbloom.schemas.listing import ListingCategoriesResponse, ListingCreate, ListingRead, ListingSort, ListingType, ListingUpdate
from skillbloom.services.listing_service import LISTING_CATEGORIES, filter_listings, sort_listings


router = APIRouter(prefix="/listings", tags=["listings"])


def _get_owned_listing(db: Session, listing_id: int, owner: User) -> Listing:
    listing = db.query(Listing).filter(Listing.id == listing_id).first()
    if not listing:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Listing not found")
    if listing.owner_id != owner.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="You can only modify your own listings")
    return listing


@router.get("", response_model=list[ListingRead])
def list_listings(
    q: str | None = Query(default=None, description="Case-insensitive search over title, description and tags"),
    category: str | None = Query(default=None, description='Category name; "All Categories" disables the filter'),
    subcategory: str | None = Query(default=None),
    type: ListingType | None = Query(default=None),
    min_price: int | None = Query(default=None, ge=0, alias="minPrice"),
    max_price: int | None = Query(default=None, ge=0, alias="maxPrice"),
    tags: list[str] | None = Query(default=None),
    sort: ListingSort = Query(default="featured"),
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
) -> list[ListingRead]:
    rows = db.query(Listing).filter(Listing.status == "active").all()
    matched = filter_listings(
        rows,
        category=category,
        subcategory=subcategory,
        listing_type=type,
        min_price=min_price,
        max_price=max_price,
        query=q,
        tags=tags,
    )
    page = sort_listings(matched, sort)[offset : offset + limit]
    return [ListingRead.model_validate(row) for row in page]


@router.get("/categories", response_model=ListingCategoriesResponse)
def list_listing_categories() -> ListingCategoriesResponse:
    return ListingCategoriesResponse(items=list(LISTING_CATEGORIES))


@router.get("/featured", response_model=list[ListingRead])
def list_featured_listings(limit: int = Query(default=6, ge=1, le=50), db: Session = Depends(get_db)) -> list[ListingRead]:
    rows = (
        db.query(Listing)
        .filter(Listing.status == "active")
        .filter(Listing.is_featured.is_(True))
        .order_by(Listing.created_at.desc(), Listing.id.desc())
        .limit(int(limit))
        .all()
    )
    return [ListingRead.model_validate(row) for row in rows]


@router.get("/{listing_id}", response_model=ListingRead)
def read_listing(listing_id: int, db: Session = Depends(get_db)) -> ListingRead:
    listing = db.query(Listing).filter(Listing.id == listing_id).first()
    if not listing:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Listing not found")
    return ListingRead.model_validate(listing)


@router.post("", response_model=ListingRead, status_code=status.HTTP_201_CREATED)
def create_listing(
    payload: ListingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_homemaker),
) -> ListingRead:
    listing = Listing(owner_id=current_user.id, **payload.model_dump())
    db.add(listing)
    db.commit()
    db.refresh(listing)
    return ListingRead.model_validate(listing)


@router.patch("/{listing_id}", response_model=ListingRead)
def update_listing(
    listing_id: int,
    payload: ListingUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_homemaker),
) -> ListingRead:
    listing = _get_owned_listing(db, listing_id, current_user)
    for field, value in payload.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(listing, field, value)
    db.commit()
    db.refresh(listing)
    return ListingRead.model_validate(listing)


@router.delete("/{listing_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_listing(
    listing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_homemaker),
) -> None:
    listing = _get_owned_listing(db, listing_id, current_user)
    db.delete(listing)
    db.commit()
