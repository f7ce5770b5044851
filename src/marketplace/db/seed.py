"""Demo users and hotels inserted into an empty database on first start.

Disable with SEED_DEMO_DATA=false.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.models import Hotel, User

DEMO_USERS = [
    {"name": "John Doe", "role": "user"},
    {"name": "Jane Smith", "role": "user"},
]

DEMO_HOTELS = [
    {
        "name": "Grand Hotel",
        "city": "Paris",
        "min_price": 100,
        "description": "An elegant hotel in the heart of Paris overlooking the Eiffel Tower.",
        "rating": 4.5,
        "image_url": "https://images.unsplash.com/photo-1566073771259-6a8506099945?w=800",
        "amenities": "Free WiFi, Pool, Gym, Spa, Restaurant, Bar",
        "address": "123 Rue de Rivoli, 75001 Paris, France",
        "phone": "+33 1 23 45 67 89",
    },
    {
        "name": "Luxury Inn",
        "city": "Paris",
        "min_price": 150,
        "description": "Luxury boutique hotel near the Champs-Élysées.",
        "rating": 4.8,
        "image_url": "https://images.unsplash.com/photo-1542314831-068cd1dbfeeb?w=800",
        "amenities": "Free WiFi, Spa, 24h Concierge",
        "address": "45 Avenue des Champs-Élysées, 75008 Paris, France",
        "phone": "+33 1 98 76 54 32",
    },
    {
        "name": "Budget Stay",
        "city": "London",
        "min_price": 80,
        "description": "Affordable but comfortable hotel in central London.",
        "rating": 4.0,
        "image_url": "https://images.unsplash.com/photo-1551882547-ff40c63fe5fa?w=800",
        "amenities": "Free WiFi, Breakfast included, 24h Reception",
        "address": "78 Oxford Street, London W1D 1BS, UK",
        "phone": "+44 20 1234 5678",
    },
    {
        "name": "City Center Hotel",
        "city": "London",
        "min_price": 120,
        "description": "Modern hotel in the middle of London's financial district.",
        "rating": 4.3,
        "image_url": "https://images.unsplash.com/photo-1520250497591-112f2f40a3f4?w=800",
        "amenities": "Free WiFi, Gym, Business center, Restaurant, Bar",
        "address": "120 Baker Street, London NW1 5RT, UK",
        "phone": "+44 20 9876 5432",
    },
]


async def seed_demo_data(db: AsyncSession) -> None:
    db.add_all([User(**user) for user in DEMO_USERS])
    db.add_all([Hotel(role="hotel", **hotel) for hotel in DEMO_HOTELS])
    await db.flush()
