"""
Service catalog management.

Any signed-in profile can add a service; editing an existing one is an
admin operation.  Services are never deleted.
"""
import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from washbay.exceptions import ValidationError
from washbay.models.profile import Profile
from washbay.models.service import CATEGORY_LABELS, Service, ServiceCategory
from washbay.schemas.service import Category
from washbay.services.access_service import require_actor, require_admin
from washbay.services.directory_service import fetch_service

logger = logging.getLogger(__name__)


def _check_price(price) -> Decimal:
    price = Decimal(price)
    if price < 0:
        raise ValidationError("Price must not be negative")
    return price


def list_categories() -> List[Category]:
    return [Category(value=category, label=label) for category, label in CATEGORY_LABELS.items()]


async def list_services(db: AsyncSession, actor: Optional[Profile]) -> List[Service]:
    """Whole catalog, alphabetical by name."""
    require_actor(actor)
    result = await db.execute(select(Service).order_by(func.lower(Service.name), Service.id))
    return list(result.scalars().all())


async def get_service(db: AsyncSession, actor: Optional[Profile], service_id: int) -> Service:
    require_actor(actor)
    return await fetch_service(db, service_id)


async def create_service(
    db: AsyncSession,
    actor: Optional[Profile],
    name: str,
    price,
    category: ServiceCategory,
) -> Service:
    require_actor(actor)
    name = (name or "").strip()
    if not name:
        raise ValidationError("Service name is required")

    service = Service(
        name=name,
        price=_check_price(price),
        category=ServiceCategory(category),
        user_id=actor.id,
    )
    db.add(service)
    await db.commit()
    await db.refresh(service)
    logger.info("Service %s (%s) added by profile %s", service.id, service.name, actor.id)
    return service


async def update_service(
    db: AsyncSession,
    actor: Optional[Profile],
    service_id: int,
    name: Optional[str] = None,
    price=None,
    category: Optional[ServiceCategory] = None,
) -> Service:
    require_admin(actor)
    service = await fetch_service(db, service_id)

    if name is not None:
        name = name.strip()
        if not name:
            raise ValidationError("Service name is required")
        service.name = name
    if price is not None:
        service.price = _check_price(price)
    if category is not None:
        service.category = ServiceCategory(category)

    await db.commit()
    await db.refresh(service)
    logger.info("Service %s edited by admin %s", service_id, actor.id)
    return service
