"""Built-in sample listings.

Raw dicts in the camelCase shape of the front-end data files; validated into
:class:`~nyumba.core.models.PropertyRecord` by
:meth:`~nyumba.catalog.store.PropertyCatalog.sample`.
"""

from __future__ import annotations

from typing import Any

__all__ = ["SAMPLE_PROPERTIES"]

SAMPLE_PROPERTIES: tuple[dict[str, Any], ...] = (
    {
        "id": "1",
        "title": "Modern Downtown Apartment",
        "location": "123 Main St, New York, NY 10001",
        "price": 2500,
        "bedrooms": 2,
        "bathrooms": 2,
        "propertyType": "apartment",
        "description": "Beautiful modern apartment in the heart of downtown with stunning city views.",
        "images": ["/placeholder.svg?height=300&width=400&text=Modern+Apartment"],
        "amenities": ["Gym", "Pool", "Parking", "Pet Friendly"],
        "rating": 4.8,
        "reviews": 24,
        "available": True,
        "landlord": "Sarah Johnson",
        "datePosted": "2024-01-15",
        "featured": True,
    },
    {
        "id": "2",
        "title": "Cozy Studio Near University",
        "location": "456 College Ave, Boston, MA 02115",
        "price": 1800,
        "bedrooms": 0,
        "bathrooms": 1,
        "propertyType": "studio",
        "description": "Perfect studio apartment for students, walking distance to campus.",
        "images": ["/placeholder.svg?height=300&width=400&text=Cozy+Studio"],
        "amenities": ["WiFi", "Laundry", "Study Area"],
        "rating": 4.5,
        "reviews": 18,
        "available": True,
        "landlord": "Mike Chen",
        "datePosted": "2024-01-12",
    },
    {
        "id": "3",
        "title": "Spacious Family House",
        "location": "789 Oak Street, Austin, TX 78701",
        "price": 3200,
        "bedrooms": 4,
        "bathrooms": 3,
        "propertyType": "house",
        "description": "Large family home with backyard, perfect for families with children.",
        "images": ["/placeholder.svg?height=300&width=400&text=Family+House"],
        "amenities": ["Backyard", "Garage", "Dishwasher", "AC"],
        "rating": 4.9,
        "reviews": 31,
        "available": True,
        "landlord": "Jennifer Davis",
        "datePosted": "2024-01-10",
    },
    {
        "id": "4",
        "title": "Luxury Condo with Pool",
        "location": "321 Beach Blvd, Miami, FL 33139",
        "price": 4500,
        "bedrooms": 3,
        "bathrooms": 2,
        "propertyType": "condo",
        "description": "Luxury beachfront condo with ocean views and resort-style amenities.",
        "images": ["/placeholder.svg?height=300&width=400&text=Luxury+Condo"],
        "amenities": ["Pool", "Beach Access", "Concierge", "Gym"],
        "rating": 4.7,
        "reviews": 42,
        "available": True,
        "landlord": "Robert Martinez",
        "datePosted": "2024-01-08",
        "featured": True,
    },
    {
        "id": "5",
        "title": "Charming Townhouse",
        "location": "654 Elm Street, Portland, OR 97201",
        "price": 2800,
        "bedrooms": 3,
        "bathrooms": 2.5,
        "propertyType": "townhouse",
        "description": "Beautiful townhouse in a quiet neighborhood with modern updates.",
        "images": ["/placeholder.svg?height=300&width=400&text=Charming+Townhouse"],
        "amenities": ["Patio", "Fireplace", "Updated Kitchen", "Parking"],
        "rating": 4.6,
        "reviews": 19,
        "available": False,
        "landlord": "Lisa Thompson",
        "datePosted": "2024-01-05",
    },
    {
        "id": "6",
        "title": "Urban Loft Space",
        "location": "987 Industrial Way, Seattle, WA 98101",
        "price": 2200,
        "bedrooms": 1,
        "bathrooms": 1,
        "propertyType": "apartment",
        "description": "Trendy loft in converted warehouse with high ceilings and exposed brick.",
        "images": ["/placeholder.svg?height=300&width=400&text=Urban+Loft"],
        "amenities": ["High Ceilings", "Exposed Brick", "Modern Appliances"],
        "rating": 4.4,
        "reviews": 15,
        "available": True,
        "landlord": "David Kim",
        "datePosted": "2024-01-03",
    },
)
