"""
HotelDesk Admin - Default Data

Permission catalog, role permission sets and sample hotel data the
seeding scripts write. Kept in step with the app's built-in defaults.
"""

from hoteldesk_admin.models.records import PermissionEntry


def _Permission(name: str, key: str, category: str, description: str) -> PermissionEntry:
    return PermissionEntry(name=name, key=key, category=category, description=description)


# ==================== Permissions ====================

DEFAULT_PERMISSIONS = [
    # Dashboard
    _Permission('View Dashboard', 'dashboard.view', 'dashboard', 'View the main dashboard'),

    # Guests
    _Permission('View Guests', 'guests.view', 'guests', 'View guest list and details'),
    _Permission('Create Guests', 'guests.create', 'guests', 'Create new guest records'),
    _Permission('Edit Guests', 'guests.edit', 'guests', 'Edit existing guest records'),
    _Permission('Delete Guests', 'guests.delete', 'guests', 'Delete guest records'),

    # Rooms
    _Permission('View Rooms', 'rooms.view', 'rooms', 'View room list and details'),
    _Permission('Create Rooms', 'rooms.create', 'rooms', 'Create new room records'),
    _Permission('Edit Rooms', 'rooms.edit', 'rooms', 'Edit existing room records'),
    _Permission('Delete Rooms', 'rooms.delete', 'rooms', 'Delete room records'),

    # Reservations
    _Permission('View Reservations', 'reservations.view', 'reservations', 'View reservation list and details'),
    _Permission('Create Reservations', 'reservations.create', 'reservations', 'Create new reservations'),
    _Permission('Edit Reservations', 'reservations.edit', 'reservations', 'Edit existing reservations'),
    _Permission('Check-in Reservations', 'reservations.checkin', 'reservations', 'Check-in guests'),
    _Permission('Check-out Reservations', 'reservations.checkout', 'reservations', 'Check-out guests'),
    _Permission('Cancel Reservations', 'reservations.cancel', 'reservations', 'Cancel reservations'),

    # Billing
    _Permission('View Billing', 'billing.view', 'billing', 'View billing records'),
    _Permission('Create Billing', 'billing.create', 'billing', 'Create billing records'),
    _Permission('Edit Billing', 'billing.edit', 'billing', 'Edit billing records'),
    _Permission('Process Payments', 'billing.payment', 'billing', 'Process payments'),

    # POS
    _Permission('View POS', 'pos.view', 'pos', 'Access POS system'),
    _Permission('POS Sales', 'pos.sales', 'pos', 'Process POS sales'),
    _Permission('Manage POS Products', 'pos.products', 'pos', 'Manage POS products'),

    # Reports
    _Permission('View Reports', 'reports.view', 'reports', 'View reports'),
    _Permission('Export Reports', 'reports.export', 'reports', 'Export reports'),

    # Messages
    _Permission('View Messages', 'messages.view', 'messages', 'View messages'),

    # Users
    _Permission('View Users', 'users.view', 'users', 'View user list'),
    _Permission('Create Users', 'users.create', 'users', 'Create new users'),
    _Permission('Edit Users', 'users.edit', 'users', 'Edit users'),
    _Permission('Delete Users', 'users.delete', 'users', 'Delete users'),

    # Roles
    _Permission('Manage Roles', 'roles.manage', 'roles', 'Manage roles and permissions'),

    # Settings
    _Permission('View Settings', 'settings.view', 'settings', 'View settings'),
    _Permission('Edit Settings', 'settings.edit', 'settings', 'Edit settings'),
]

LANDING_PERMISSIONS = [
    _Permission('View Landing Page', 'landing.view', 'landing', 'View the public landing page'),
    _Permission('Manage Landing Page', 'landing.manage', 'landing', 'Manage landing page content, media, and settings'),
]

# ==================== Roles ====================

_FULL_ACCESS = [
    'dashboard.view',
    'guests.view', 'guests.create', 'guests.edit', 'guests.delete',
    'rooms.view', 'rooms.create', 'rooms.edit', 'rooms.delete',
    'reservations.view', 'reservations.create', 'reservations.edit',
    'reservations.checkin', 'reservations.checkout', 'reservations.cancel',
    'billing.view', 'billing.create', 'billing.edit', 'billing.payment',
    'pos.view', 'pos.sales', 'pos.products',
    'reports.view', 'reports.export',
    'messages.view',
    'users.view', 'users.create', 'users.edit', 'users.delete', 'roles.manage',
    'settings.view', 'settings.edit',
]

# Role name -> permission keys, in the order roles are seeded
DEFAULT_ROLE_PERMISSIONS = {
    'Owner': list(_FULL_ACCESS),
    'Admin': list(_FULL_ACCESS),
    'Manager': [
        'dashboard.view',
        'guests.view', 'guests.create', 'guests.edit',
        'rooms.view', 'rooms.create', 'rooms.edit',
        'reservations.view', 'reservations.create', 'reservations.edit',
        'reservations.checkin', 'reservations.checkout',
        'billing.view', 'billing.create', 'billing.edit', 'billing.payment',
        'pos.view', 'pos.sales',
        'reports.view', 'reports.export',
        'messages.view',
        'users.view',
        'settings.view',
    ],
    'Receptionist': [
        'dashboard.view',
        'guests.view', 'guests.create', 'guests.edit',
        'rooms.view',
        'reservations.view', 'reservations.create', 'reservations.edit',
        'reservations.checkin', 'reservations.checkout',
        'billing.view', 'billing.create', 'billing.payment',
        'messages.view',
    ],
    'Cashier': [
        'dashboard.view',
        'pos.view', 'pos.sales',
        'messages.view',
    ],
    'Staff': [
        'dashboard.view',
        'guests.view',
        'rooms.view',
        'reservations.view',
        'messages.view',
    ],
}

CASHIER_ROLE_NAME = 'Cashier'
CASHIER_USER_ROLE = 'cashier'

# Cashier with POS plus dashboard and messages
CASHIER_PERMISSIONS = ['dashboard.view', 'pos.view', 'pos.sales', 'messages.view']

# Cashier restricted to the POS screens
CASHIER_POS_ONLY_PERMISSIONS = ['pos.view', 'pos.sales']

# Roles that manage the public landing page
LANDING_ROLES = ['Owner', 'Admin', 'Manager']

# Permissions shown in the per-user summary, label -> key
KEY_PERMISSION_CHECKS = {
    'Dashboard': 'dashboard.view',
    'Guests': 'guests.view',
    'Reservations': 'reservations.view',
    'Rooms': 'rooms.view',
    'Billing': 'billing.view',
    'POS': 'pos.view',
    'Messages': 'messages.view',
}

# ==================== Sample Hotel Data ====================

SAMPLE_ROOMS = [
    {'room_number': '101', 'floor': 1, 'room_type': 'single', 'capacity': 1, 'price_per_night': 100, 'status': 'available'},
    {'room_number': '102', 'floor': 1, 'room_type': 'double', 'capacity': 2, 'price_per_night': 150, 'status': 'available'},
    {'room_number': '201', 'floor': 2, 'room_type': 'double', 'capacity': 2, 'price_per_night': 150, 'status': 'available'},
    {'room_number': '202', 'floor': 2, 'room_type': 'suite', 'capacity': 4, 'price_per_night': 250, 'status': 'available'},
    {'room_number': '301', 'floor': 3, 'room_type': 'deluxe', 'capacity': 2, 'price_per_night': 300, 'status': 'available'},
    {'room_number': '302', 'floor': 3, 'room_type': 'suite', 'capacity': 4, 'price_per_night': 250, 'status': 'available'},
]

SAMPLE_GUESTS = [
    {'first_name': 'John', 'last_name': 'Doe', 'email': 'john.doe@email.com', 'phone': '+1-555-0101', 'id_type': 'passport', 'id_number': 'P123456', 'country': 'USA', 'guest_type': 'regular'},
    {'first_name': 'Jane', 'last_name': 'Smith', 'email': 'jane.smith@email.com', 'phone': '+1-555-0102', 'id_type': 'driver_license', 'id_number': 'DL789012', 'country': 'USA', 'guest_type': 'vip'},
    {'first_name': 'Michael', 'last_name': 'Johnson', 'email': 'michael.j@email.com', 'phone': '+1-555-0103', 'id_type': 'passport', 'id_number': 'P345678', 'country': 'Canada', 'guest_type': 'regular'},
    {'first_name': 'Sarah', 'last_name': 'Williams', 'email': 'sarah.w@email.com', 'phone': '+1-555-0104', 'id_type': 'national_id', 'id_number': 'NID901234', 'country': 'UK', 'guest_type': 'corporate'},
    {'first_name': 'Robert', 'last_name': 'Brown', 'email': 'robert.b@email.com', 'phone': '+1-555-0105', 'id_type': 'passport', 'id_number': 'P567890', 'country': 'USA', 'guest_type': 'regular'},
    {'first_name': 'Emily', 'last_name': 'Davis', 'email': 'emily.d@email.com', 'phone': '+1-555-0106', 'id_type': 'driver_license', 'id_number': 'DL123456', 'country': 'USA', 'guest_type': 'vip'},
]

# Offsets are days from today; guest/room indexes point into the lists above
SAMPLE_RESERVATIONS = [
    {'guest_index': 0, 'room_index': 0, 'check_in_offset': 0, 'check_out_offset': 2, 'status': 'checked_in', 'total_price': 200},
    {'guest_index': 1, 'room_index': 1, 'check_in_offset': 0, 'check_out_offset': 3, 'status': 'checked_in', 'total_price': 450},
    {'guest_index': 2, 'room_index': 2, 'check_in_offset': 1, 'check_out_offset': 4, 'status': 'reserved', 'total_price': 450},
    {'guest_index': 3, 'room_index': 3, 'check_in_offset': 5, 'check_out_offset': 8, 'status': 'reserved', 'total_price': 750},
    {'guest_index': 4, 'room_index': 4, 'check_in_offset': -3, 'check_out_offset': -1, 'status': 'checked_out', 'total_price': 600},
    {'guest_index': 5, 'room_index': 5, 'check_in_offset': 7, 'check_out_offset': 10, 'status': 'reserved', 'total_price': 750},
]

RESTAURANT_CATEGORIES = [
    {'name': 'Appetizers', 'description': 'Starters and appetizers'},
    {'name': 'Main Course', 'description': 'Main dishes'},
    {'name': 'Desserts', 'description': 'Desserts and sweets'},
    {'name': 'Beverages', 'description': 'Drinks and beverages'},
]

# First ids used when the collections are empty, clear of retail ids
RESTAURANT_CATEGORY_FIRST_ID = 100
RESTAURANT_PRODUCT_FIRST_ID = 1000

RESTAURANT_PRODUCTS = [
    # Appetizers
    {'name': 'Bruschetta', 'price': 8.99, 'category': 'Appetizers', 'description': 'Toasted bread with tomatoes and basil'},
    {'name': 'Calamari Fritti', 'price': 12.99, 'category': 'Appetizers', 'description': 'Fried calamari rings'},
    {'name': 'Shrimp Cocktail', 'price': 14.99, 'category': 'Appetizers', 'description': 'Chilled shrimp with cocktail sauce'},
    {'name': 'Caesar Salad', 'price': 10.99, 'category': 'Appetizers', 'description': 'Classic Caesar salad'},

    # Main Course
    {'name': 'Filet Mignon', 'price': 35.99, 'category': 'Main Course', 'description': 'Prime beef filet, cooked to perfection'},
    {'name': 'Grilled Salmon', 'price': 28.99, 'category': 'Main Course', 'description': 'Fresh grilled salmon with herbs'},
    {'name': 'Pasta Carbonara', 'price': 18.99, 'category': 'Main Course', 'description': 'Creamy pasta with bacon and eggs'},
    {'name': 'Vegetable Risotto', 'price': 16.99, 'category': 'Main Course', 'description': 'Creamy risotto with seasonal vegetables'},
    {'name': 'Chicken Burger', 'price': 14.99, 'category': 'Main Course', 'description': 'Grilled chicken burger with fries'},
    {'name': 'Club Sandwich', 'price': 12.99, 'category': 'Main Course', 'description': 'Triple-decker club sandwich'},

    # Desserts
    {'name': 'Chocolate Lava Cake', 'price': 9.99, 'category': 'Desserts', 'description': 'Warm chocolate cake with molten center'},
    {'name': 'Panna Cotta', 'price': 8.99, 'category': 'Desserts', 'description': 'Italian cream dessert with berry sauce'},
    {'name': 'Tiramisu', 'price': 8.99, 'category': 'Desserts', 'description': 'Classic Italian tiramisu'},
    {'name': 'Cheesecake', 'price': 9.99, 'category': 'Desserts', 'description': 'New York style cheesecake'},

    # Beverages
    {'name': 'House Wine (Glass)', 'price': 8.99, 'category': 'Beverages', 'description': 'House wine selection'},
    {'name': 'Cocktail (House)', 'price': 12.99, 'category': 'Beverages', 'description': 'House special cocktail'},
    {'name': 'Fresh Juice', 'price': 6.99, 'category': 'Beverages', 'description': 'Fresh squeezed juice'},
    {'name': 'Espresso', 'price': 3.99, 'category': 'Beverages', 'description': 'Single shot espresso'},
    {'name': 'Cappuccino', 'price': 4.99, 'category': 'Beverages', 'description': 'Italian cappuccino'},
]
