"""Mock data generator for the customer/order/item graph.

Population layout:
┌──────────────────────┬────────────────────────────┬──────────────────────┐
│ Customers            │ Name / email               │ created_at           │
├──────────────────────┼────────────────────────────┼──────────────────────┤
│ KNOWN_CUSTOMER_IDS   │ Test User N / testN@…      │ now - [1, 365] days  │
│ random (count)       │ drawn from name pools      │ now - (365 + i) days │
│ fallback (on miss)   │ Fallback Customer          │ now - [1, 365] days  │
└──────────────────────┴────────────────────────────┴──────────────────────┘

Every order holds 1-5 items and every customer 0-10 orders, sorted by date.
Totals are summed once here and never recomputed.
"""

import random
import uuid
from datetime import datetime, timedelta, timezone

from tailor_dashboard.models.customer import Customer, CustomerStatus
from tailor_dashboard.models.order import CustomSize, Order, OrderItem

ITEM_NAMES = [
    "Bespoke Linen Blazer",
    "Custom Wool Suit",
    "Tailored Cotton Shirt",
    "Designer Silk Dress",
    "Premium Cashmere Coat",
    "Hand-stitched Leather Jacket",
    "Classic Three-piece Suit",
    "Evening Gown",
    "Business Formal Shirt",
    "Wedding Dress",
]
CATEGORIES = ["Jackets", "Trousers", "Dresses", "Shirts", "Suits"]

FIRST_NAMES = [
    "Amelia", "Oliver", "Isla", "George", "Ava", "Noah", "Mia", "Arthur",
    "Grace", "Leo", "Freya", "Oscar", "Lily", "Theo", "Sophia", "Harry",
    "Ivy", "Jack", "Rosie", "Henry", "Elena", "Mateo", "Yuki", "Ravi",
]
LAST_NAMES = [
    "Smith", "Jones", "Taylor", "Brown", "Williams", "Wilson", "Johnson",
    "Davies", "Patel", "Robinson", "Wright", "Thompson", "Evans", "Walker",
    "White", "Roberts", "Green", "Hall", "Clarke", "Nakamura", "Rossi",
]
EMAIL_DOMAINS = ["example.com", "mail.com", "inbox.org", "post.net"]

# Fixed ids so a browser holding them across restarts still resolves.
KNOWN_CUSTOMER_IDS = [
    "a605ac61-d2cf-4051-b166-c4b4a0c45179",
    "924daa4b-39d8-4085-a29e-8332a1316633",
    "296879ac-1cd1-47c7-890e-5b5536787893",
    "b715bc72-e3de-4152-c277-d5c5b1d56280",
]

ORDER_COUNT_RANGE = (0, 10)
ITEM_COUNT_RANGE = (1, 5)
PRICE_RANGE = (100, 1000)
DAYS_AGO_RANGE = (1, 365)
CHEST_RANGE = (30, 50)
WAIST_RANGE = (28, 48)
HIPS_RANGE = (30, 50)

FALLBACK_NAME = "Fallback Customer"
FALLBACK_EMAIL = "fallback@example.com"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _uuid(rng: random.Random) -> str:
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def generate_order_items(rng: random.Random) -> list[OrderItem]:
    return [
        OrderItem(
            order_item_id=_uuid(rng),
            item_name=rng.choice(ITEM_NAMES),
            category=rng.choice(CATEGORIES),
            price=round(rng.uniform(*PRICE_RANGE), 2),
            custom_size=CustomSize(
                chest=rng.randint(*CHEST_RANGE),
                waist=rng.randint(*WAIST_RANGE),
                hips=rng.randint(*HIPS_RANGE),
            ),
        )
        for _ in range(rng.randint(*ITEM_COUNT_RANGE))
    ]


def generate_orders(rng: random.Random, now: datetime) -> list[Order]:
    """Generate 0-10 orders sorted ascending by date."""
    orders = []
    for _ in range(rng.randint(*ORDER_COUNT_RANGE)):
        items = generate_order_items(rng)
        orders.append(
            Order(
                order_id=_uuid(rng),
                order_date=now - timedelta(days=rng.randint(*DAYS_AGO_RANGE)),
                total_amount=round(sum(i.price for i in items), 2),
                items=items,
            )
        )
    orders.sort(key=lambda o: o.order_date)
    return orders


def _random_identity(rng: random.Random) -> tuple[str, str]:
    first, last = rng.choice(FIRST_NAMES), rng.choice(LAST_NAMES)
    email = f"{first}.{last}{rng.randint(1, 99)}@{rng.choice(EMAIL_DOMAINS)}".lower()
    return f"{first} {last}", email


def generate_customer(
    rng: random.Random,
    *,
    customer_id: str | None = None,
    name: str | None = None,
    email: str | None = None,
    created_at: datetime | None = None,
    now: datetime | None = None,
) -> Customer:
    """Generate one customer with a full order graph.

    Missing identity fields are drawn from ``rng``; aggregates are derived
    from the generated orders.
    """
    now = now or _utcnow()
    orders = generate_orders(rng, now)
    random_name, random_email = _random_identity(rng)
    return Customer.with_orders(
        id=customer_id or _uuid(rng),
        name=name or random_name,
        email=email or random_email,
        status=rng.choice(list(CustomerStatus)),
        created_at=created_at or now - timedelta(days=rng.randint(*DAYS_AGO_RANGE)),
        orders=orders,
    )


def generate_fallback_customer(
    customer_id: str, *, now: datetime | None = None
) -> Customer:
    """Placeholder customer for an unknown id, seeded by the id itself."""
    return generate_customer(
        random.Random(customer_id),
        customer_id=customer_id,
        name=FALLBACK_NAME,
        email=FALLBACK_EMAIL,
        now=now,
    )


def generate_customers(
    count: int, *, seed: int | None = None, now: datetime | None = None
) -> list[Customer]:
    """Known customers first, then ``count`` random ones."""
    rng = random.Random(seed)
    now = now or _utcnow()

    known = [
        generate_customer(
            rng,
            customer_id=cid,
            name=f"Test User {n}",
            email=f"test{n}@example.com",
            now=now,
        )
        for n, cid in enumerate(KNOWN_CUSTOMER_IDS, start=1)
    ]
    randoms = [
        generate_customer(rng, created_at=now - timedelta(days=365 + i), now=now)
        for i in range(count)
    ]
    return known + randoms
