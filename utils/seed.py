from models import db
from models.property import Property

_UNSPLASH = "https://images.unsplash.com/{}?auto=format&fit=crop&w=2070&q=80"

DEMO_PROPERTIES = [
    {
        "id": "prop-001",
        "title": "Luxury Ocean View Villa",
        "description": "A stunning luxury villa with panoramic ocean views, featuring modern amenities and elegant design.",
        "property_type": "villa",
        "address": "12 Harbour Road", "city": "St Ives", "county": "Cornwall",
        "region": "England", "postcode": "TR26 1LP", "latitude": 50.2110, "longitude": -5.4800,
        "images": [
            {"id": "img-001", "url": _UNSPLASH.format("photo-1613490493576-7fde63acd811"),
             "alt": "Ocean view villa exterior", "is_primary": True, "order": 1},
            {"id": "img-002", "url": _UNSPLASH.format("photo-1600596542815-ffad4c1539a9"),
             "alt": "Modern living room", "is_primary": False, "order": 2},
        ],
        "amenities": ["WiFi", "Pool", "Kitchen", "Parking", "Air Conditioning", "Beach Access", "Balcony"],
        "nightly_price": 850, "cleaning_fee": 150, "service_fee": 85,
        "max_guests": 8, "bedrooms": 4, "bathrooms": 3, "beds": 4,
        "rating": 4.9, "review_count": 127, "featured": True,
    },
    {
        "id": "prop-002",
        "title": "Modern Riverside Loft",
        "description": "Sleek and sophisticated loft in the heart of the city with stunning river views.",
        "property_type": "loft",
        "address": "45 Shad Thames", "city": "London", "county": "Greater London",
        "region": "England", "postcode": "SE1 2YD",
        "images": [
            {"id": "img-004", "url": _UNSPLASH.format("photo-1502672260266-1c1ef2d93688"),
             "alt": "Modern loft interior", "is_primary": True, "order": 1},
        ],
        "amenities": ["WiFi", "Kitchen", "Air Conditioning", "Heating", "TV", "Washing Machine", "Gym"],
        "nightly_price": 320, "cleaning_fee": 75, "service_fee": 32,
        "max_guests": 4, "bedrooms": 2, "bathrooms": 2, "beds": 2,
        "rating": 4.7, "review_count": 89, "featured": True,
    },
    {
        "id": "prop-003",
        "title": "Cosy Highland Cabin",
        "description": "Charming cabin nestled in the mountains with fireplace and hot tub.",
        "property_type": "cabin",
        "address": "Glen Nevis Estate", "city": "Fort William", "county": "Inverness-shire",
        "region": "Scotland", "postcode": "PH33 6SX",
        "images": [
            {"id": "img-006", "url": _UNSPLASH.format("photo-1449824913935-59a10b8d2000"),
             "alt": "Highland cabin exterior", "is_primary": True, "order": 1},
        ],
        "amenities": ["WiFi", "Hot Tub", "Fireplace", "Kitchen", "Heating", "Parking", "Garden"],
        "nightly_price": 275, "cleaning_fee": 100, "service_fee": 27.50,
        "max_guests": 6, "bedrooms": 3, "bathrooms": 2, "beds": 3,
        "rating": 4.8, "review_count": 156, "featured": False,
    },
    {
        "id": "prop-004",
        "title": "Elegant Georgian Flat",
        "description": "Beautifully appointed flat in an elegant New Town crescent.",
        "property_type": "apartment",
        "address": "8 Royal Circus", "city": "Edinburgh", "county": "Midlothian",
        "region": "Scotland", "postcode": "EH3 6SR",
        "images": [
            {"id": "img-008", "url": _UNSPLASH.format("photo-1522708323590-d24dbb6b0267"),
             "alt": "Georgian flat living room", "is_primary": True, "order": 1},
        ],
        "amenities": ["WiFi", "Kitchen", "Air Conditioning", "TV", "Washing Machine", "Balcony"],
        "nightly_price": 450, "cleaning_fee": 120, "service_fee": 45,
        "max_guests": 5, "bedrooms": 2, "bathrooms": 2, "beds": 2,
        "rating": 4.6, "review_count": 73, "featured": False,
    },
    {
        "id": "prop-005",
        "title": "Beachfront Paradise House",
        "description": "Stunning beachfront house with private beach access and outdoor deck.",
        "property_type": "house",
        "address": "3 Dunes Lane", "city": "Tenby", "county": "Pembrokeshire",
        "region": "Wales", "postcode": "SA70 7BX",
        "images": [
            {"id": "img-010", "url": _UNSPLASH.format("photo-1512917774080-9991f1c4c750"),
             "alt": "Beachfront house exterior", "is_primary": True, "order": 1},
        ],
        "amenities": ["WiFi", "Beach Access", "Pool", "Kitchen", "Air Conditioning", "Balcony", "Barbecue"],
        "nightly_price": 680, "cleaning_fee": 180, "service_fee": 68,
        "max_guests": 10, "bedrooms": 5, "bathrooms": 4, "beds": 5,
        "rating": 4.9, "review_count": 203, "featured": True,
    },
    {
        "id": "prop-006",
        "title": "Historic Townhouse",
        "description": "Charming historic townhouse with original architectural details.",
        "property_type": "townhouse",
        "address": "21 The Circus", "city": "Bath", "county": "Somerset",
        "region": "England", "postcode": "BA1 2EW",
        "images": [
            {"id": "img-012", "url": _UNSPLASH.format("photo-1605146769289-440113cc3d00"),
             "alt": "Historic townhouse facade", "is_primary": True, "order": 1},
        ],
        "amenities": ["WiFi", "Kitchen", "Heating", "Fireplace", "TV", "Washing Machine", "Garden"],
        "nightly_price": 380, "cleaning_fee": 90, "service_fee": 38,
        "max_guests": 6, "bedrooms": 3, "bathrooms": 2, "beds": 3,
        "rating": 4.5, "review_count": 67, "featured": False,
    },
]

def seed_properties() -> int:
    """Insert the demo catalogue; rows that already exist are left alone."""
    existing = {p.id for p in Property.query.with_entities(Property.id).all()}
    added = 0
    for row in DEMO_PROPERTIES:
        if row["id"] not in existing:
            db.session.add(Property(**row))
            added += 1
    db.session.commit()
    return added
