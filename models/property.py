from datetime import datetime
from models.db import db, new_id

PROPERTY_TYPES = ("villa", "apartment", "house", "condo", "townhouse", "cabin", "loft")

class Property(db.Model):
    __tablename__ = "properties"

    id = db.Column(db.String(36), primary_key=True, default=new_id)

    title = db.Column(db.String(160), nullable=False)
    description = db.Column(db.Text, nullable=True)
    property_type = db.Column(db.String(20), nullable=False, default="house", index=True)

    # location
    address = db.Column(db.String(255), nullable=False)
    city = db.Column(db.String(120), nullable=False, index=True)
    county = db.Column(db.String(120), nullable=True)
    region = db.Column(db.String(60), nullable=True)  # England, Scotland, Wales, Northern Ireland
    country = db.Column(db.String(120), nullable=False, default="United Kingdom")
    postcode = db.Column(db.String(16), nullable=True)
    latitude = db.Column(db.Float, nullable=True)
    longitude = db.Column(db.Float, nullable=True)

    images = db.Column(db.JSON, nullable=False, default=list)
    amenities = db.Column(db.JSON, nullable=False, default=list)

    # prices in major currency units (GBP)
    nightly_price = db.Column(db.Numeric(10, 2, asdecimal=False), nullable=False)
    cleaning_fee = db.Column(db.Numeric(10, 2, asdecimal=False), nullable=False, default=0)
    service_fee = db.Column(db.Numeric(10, 2, asdecimal=False), nullable=False, default=0)

    # capacity
    max_guests = db.Column(db.Integer, nullable=False, default=1)
    bedrooms = db.Column(db.Integer, nullable=False, default=1)
    bathrooms = db.Column(db.Integer, nullable=False, default=1)
    beds = db.Column(db.Integer, nullable=False, default=1)

    host_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=True)
    rating = db.Column(db.Float, nullable=False, default=0)
    review_count = db.Column(db.Integer, nullable=False, default=0)
    featured = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    bookings = db.relationship("Booking", back_populates="property")

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "property_type": self.property_type,
            "location": {
                "address": self.address,
                "city": self.city,
                "county": self.county,
                "region": self.region,
                "country": self.country,
                "postcode": self.postcode,
                "latitude": self.latitude,
                "longitude": self.longitude,
            },
            "images": self.images or [],
            "amenities": self.amenities or [],
            "nightly_price": self.nightly_price,
            "cleaning_fee": self.cleaning_fee,
            "service_fee": self.service_fee,
            "capacity": {
                "guests": self.max_guests,
                "bedrooms": self.bedrooms,
                "bathrooms": self.bathrooms,
                "beds": self.beds,
            },
            "host_id": self.host_id,
            "rating": self.rating,
            "review_count": self.review_count,
            "featured": self.featured,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
