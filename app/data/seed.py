# app/data/seed.py
"""
Bundled first-run dataset.

Loaded into storage by app.services.seed_service only when the
`products` / `vendors` keys are absent.
"""

VENDORS: list[dict] = [
    {
        "id": "v1",
        "name": "Artisan Woodworks",
        "description": "Handcrafted furniture and home goods from reclaimed timber.",
        "logo_url": "https://picsum.photos/seed/vendor1logo/200/200",
        "cover_image_url": "https://picsum.photos/seed/vendor1cover/1200/400",
        "rating": 4.8,
    },
    {
        "id": "v2",
        "name": "Gadget Galaxy",
        "description": "The latest electronics and smart accessories.",
        "logo_url": "https://picsum.photos/seed/vendor2logo/200/200",
        "cover_image_url": "https://picsum.photos/seed/vendor2cover/1200/400",
        "rating": 4.5,
    },
    {
        "id": "v3",
        "name": "Green Thumb Gardens",
        "description": "Plants, pots and everything for the indoor gardener.",
        "logo_url": "https://picsum.photos/seed/vendor3logo/200/200",
        "cover_image_url": "https://picsum.photos/seed/vendor3cover/1200/400",
        "rating": 4.9,
    },
    {
        "id": "v4",
        "name": "Threadbare Apparel",
        "description": "Sustainable clothing made from organic fabrics.",
        "logo_url": "https://picsum.photos/seed/vendor4logo/200/200",
        "cover_image_url": "https://picsum.photos/seed/vendor4cover/1200/400",
        "rating": 4.2,
    },
]

PRODUCTS: list[dict] = [
    {
        "id": "p1",
        "name": "Walnut Coffee Table",
        "description": "A solid walnut coffee table with a hand-rubbed oil finish.",
        "price": 349.99,
        "image_url": "https://picsum.photos/seed/p1/600/600",
        "gallery": [
            "https://picsum.photos/seed/p1a/600/600",
            "https://picsum.photos/seed/p1b/600/600",
        ],
        "vendor_id": "v1",
        "category": "Furniture",
        "rating": 4.7,
        "review_count": 38,
    },
    {
        "id": "p2",
        "name": "Oak Cutting Board",
        "description": "End-grain oak board, gentle on knives.",
        "price": 59.0,
        "image_url": "https://picsum.photos/seed/p2/600/600",
        "gallery": [],
        "vendor_id": "v1",
        "category": "Kitchen",
        "rating": 4.9,
        "review_count": 112,
    },
    {
        "id": "p3",
        "name": "Wireless Earbuds",
        "description": "Noise-cancelling earbuds with a 24 hour charging case.",
        "price": 89.99,
        "image_url": "https://picsum.photos/seed/p3/600/600",
        "gallery": ["https://picsum.photos/seed/p3a/600/600"],
        "vendor_id": "v2",
        "category": "Electronics",
        "rating": 4.3,
        "review_count": 540,
    },
    {
        "id": "p4",
        "name": "Smart Desk Lamp",
        "description": "Adjustable colour temperature lamp with app control.",
        "price": 45.5,
        "image_url": "https://picsum.photos/seed/p4/600/600",
        "gallery": [],
        "vendor_id": "v2",
        "category": "Electronics",
        "rating": 4.1,
        "review_count": 87,
    },
    {
        "id": "p5",
        "name": "Charging Widget",
        "description": "Compact three-port USB-C charger for travel.",
        "price": 29.99,
        "image_url": "https://picsum.photos/seed/p5/600/600",
        "gallery": [],
        "vendor_id": "v2",
        "category": "Electronics",
        "rating": 4.0,
        "review_count": 64,
    },
    {
        "id": "p6",
        "name": "Fiddle Leaf Fig",
        "description": "A two-foot fiddle leaf fig in a ceramic pot.",
        "price": 65.0,
        "image_url": "https://picsum.photos/seed/p6/600/600",
        "gallery": [],
        "vendor_id": "v3",
        "category": "Plants",
        "rating": 4.6,
        "review_count": 21,
    },
    {
        "id": "p7",
        "name": "Terracotta Pot Set",
        "description": "Set of three unglazed terracotta pots with saucers.",
        "price": 24.0,
        "image_url": "https://picsum.photos/seed/p7/600/600",
        "gallery": [],
        "vendor_id": "v3",
        "category": "Garden",
        "rating": 4.8,
        "review_count": 73,
    },
    {
        "id": "p8",
        "name": "Organic Cotton Tee",
        "description": "Relaxed fit t-shirt made from organic cotton.",
        "price": 32.0,
        "image_url": "https://picsum.photos/seed/p8/600/600",
        "gallery": [],
        "vendor_id": "v4",
        "category": "Apparel",
        "rating": 4.4,
        "review_count": 156,
    },
    {
        "id": "p9",
        "name": "Linen Overshirt",
        "description": "Lightweight linen overshirt, perfect for layering.",
        "price": 78.0,
        "image_url": "https://picsum.photos/seed/p9/600/600",
        "gallery": [],
        "vendor_id": "v4",
        "category": "Apparel",
        "rating": 4.2,
        "review_count": 42,
    },
]
