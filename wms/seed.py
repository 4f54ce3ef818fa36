# Demo dataset used when storage holds no snapshot yet
PLACEHOLDER_IMAGE = "https://placehold.co/50x50/png"

SEED_PRODUCTS = [
    {"id": 1, "sku": "PROD-001", "name": "Wireless Mouse", "category": "Electronics", "qty": 45, "image": PLACEHOLDER_IMAGE},
    {"id": 2, "sku": "PROD-002", "name": "Office Chair", "category": "Furniture", "qty": 2, "image": PLACEHOLDER_IMAGE},
    {"id": 3, "sku": "PROD-003", "name": "Mechanical Keyboard", "category": "Electronics", "qty": 12, "image": PLACEHOLDER_IMAGE},
    {"id": 4, "sku": "PROD-004", "name": "USB-C Cable", "category": "Electronics", "qty": 0, "image": PLACEHOLDER_IMAGE},
]

SEED_TRANSACTIONS = [
    {"date": "2023-10-25 10:30", "sku": "PROD-001", "name": "Wireless Mouse", "type": "IN", "qty": 50},
    {"date": "2023-10-25 14:15", "sku": "PROD-001", "name": "Wireless Mouse", "type": "OUT", "qty": 5},
    {"date": "2023-10-26 09:00", "sku": "PROD-004", "name": "USB-C Cable", "type": "OUT", "qty": 20},
]
