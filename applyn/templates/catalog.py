"""Built-in industry template catalog.

Each vertical is assembled once at import time. Component ids are numbered
per template (``<template>_<n>``); app instances never reuse them because
`clone_template` assigns fresh ids before anything is persisted.
"""

from __future__ import annotations

import itertools
from types import MappingProxyType
from typing import Any

from applyn.spacing import SpacingToken
from applyn.templates.models import (
    IndustryTemplate,
    TemplateComponent,
    TemplateScreen,
    freeze,
)

S8 = SpacingToken.SPACE_8.value
S16 = SpacingToken.SPACE_16.value
S24 = SpacingToken.SPACE_24.value
S32 = SpacingToken.SPACE_32.value


def _img(photo: str, width: int = 400) -> str:
    return f"https://images.unsplash.com/photo-{photo}?w={width}"


class _Components:
    """Component factory numbering ids within one template."""

    def __init__(self, template_id: str):
        self._template_id = template_id
        self._ids = itertools.count(1)

    def __call__(
        self, type_: str, *children: TemplateComponent, **props: Any
    ) -> TemplateComponent:
        return TemplateComponent(
            id=f"{self._template_id}_{next(self._ids)}",
            type=type_,
            props=freeze(props),
            children=tuple(children) if children else None,
        )


def _screen(
    screen_id: str,
    name: str,
    icon: str,
    *components: TemplateComponent,
    is_home: bool | None = None,
) -> TemplateScreen:
    return TemplateScreen(
        id=screen_id, name=name, icon=icon, components=components, is_home=is_home
    )


def _profile_header(c: _Components, color: str, name: str, email: str) -> TemplateComponent:
    return c(
        "container",
        c("image", src=_img("1472099645785-5658abf4ff4e", 200), width=80, height=80, borderRadius=40),
        c("spacer", height=S16),
        c("heading", text=name, level=3, color="#fff"),
        c("text", text=email, fontSize=14, color="#fff", opacity=0.8),
        padding=S24,
        backgroundColor=color,
        align="center",
    )


# =============================================================================
# E-Commerce
# =============================================================================


def _ecommerce() -> IndustryTemplate:
    c = _Components("ecommerce")
    products = [
        {"id": "1", "name": "Organic Tomatoes", "price": "$4.99", "image": _img("1546470427-227c7369a9b8"), "rating": 4.5, "category": "Vegetables"},
        {"id": "2", "name": "Fresh Spinach", "price": "$3.49", "image": _img("1576045057995-568f588f82fb"), "rating": 4.8, "category": "Vegetables"},
        {"id": "3", "name": "Free Range Eggs", "price": "$6.99", "image": _img("1582722872445-44dc5f7e3c8f"), "rating": 4.9, "badge": "Best Seller", "category": "Dairy"},
        {"id": "4", "name": "Artisan Cheese", "price": "$8.99", "image": _img("1486297678162-eb2a19b0a32d"), "rating": 4.7, "category": "Dairy"},
        {"id": "5", "name": "Fresh Apples", "price": "$3.99", "image": _img("1567306226416-28f0efdc88ce"), "rating": 4.7, "category": "Fruits"},
        {"id": "6", "name": "Sweet Bananas", "price": "$2.49", "image": _img("1571771894821-ce9b6c11b08e"), "rating": 4.6, "category": "Fruits"},
    ]
    return IndustryTemplate(
        id="ecommerce",
        name="E-Commerce Store",
        description="Complete online shopping experience",
        primary_color="#F97316",
        secondary_color="#FCD34D",
        icon="shopping-cart",
        features=("bottomNav", "pushNotifications", "offlineScreen", "deepLinking"),
        screens=(
            _screen(
                "home",
                "Home",
                "home",
                c(
                    "hero",
                    title="Fresh Products",
                    subtitle="Delivered to your door",
                    buttonText="Shop Now",
                    buttonAction="navigate:products",
                    backgroundImage=_img("1542838132-92c53300491e", 800),
                    overlayColor="rgba(0,0,0,0.4)",
                    height=280,
                ),
                c(
                    "section",
                    c(
                        "grid",
                        c("card", title="Vegetables", icon="tag", backgroundColor="#E8F5E9", compact=True),
                        c("card", title="Fruits", icon="tag", backgroundColor="#FFEBEE", compact=True),
                        c("card", title="Dairy", icon="tag", backgroundColor="#FFF8E1", compact=True),
                        columns=3,
                        gap=S16,
                    ),
                    title="Featured Categories",
                    padding=S16,
                ),
                c(
                    "section",
                    c("productGrid", columns=2, products=products[:4]),
                    title="Popular Products",
                    padding=S16,
                    showMore=True,
                    showMoreAction="navigate:products",
                ),
                c(
                    "section",
                    c(
                        "carousel",
                        items=[
                            {"title": "20% Off Fresh Produce", "subtitle": "This weekend only", "image": _img("1610832958506-aa56368176cf", 600), "buttonText": "Shop Now"},
                            {"title": "Free Delivery", "subtitle": "On orders over $50", "image": _img("1586201375761-83865001e31c", 600), "buttonText": "Learn More"},
                        ],
                    ),
                    title="Special Offers",
                    padding=S16,
                    backgroundColor="#FFF3E0",
                ),
                is_home=True,
            ),
            _screen(
                "products",
                "Products",
                "package",
                c(
                    "container",
                    c("input", placeholder="Search products...", type="search", icon="search"),
                    padding=S16,
                    backgroundColor="#f5f5f5",
                ),
                c(
                    "container",
                    c(
                        "grid",
                        c("button", text="All", variant="primary", size="sm"),
                        c("button", text="Vegetables", variant="outline", size="sm"),
                        c("button", text="Fruits", variant="outline", size="sm"),
                        c("button", text="Dairy", variant="outline", size="sm"),
                        columns=4,
                        gap=S8,
                        scrollable=True,
                    ),
                    padding=S16,
                ),
                c("productGrid", columns=2, products=products),
            ),
            _screen(
                "cart",
                "Cart",
                "shopping-cart",
                c(
                    "section",
                    c(
                        "list",
                        variant="cart",
                        items=[
                            {"id": "1", "name": "Organic Tomatoes", "price": "$4.99", "quantity": 2, "image": _img("1546470427-227c7369a9b8", 200)},
                            {"id": "2", "name": "Fresh Spinach", "price": "$3.49", "quantity": 1, "image": _img("1576045057995-568f588f82fb", 200)},
                            {"id": "3", "name": "Free Range Eggs", "price": "$6.99", "quantity": 1, "image": _img("1582722872445-44dc5f7e3c8f", 200)},
                        ],
                    ),
                    title="Your Cart",
                    subtitle="3 items",
                    padding=S16,
                ),
                c("divider", color="#e5e7eb", thickness=1),
                c(
                    "container",
                    c("text", text="Subtotal", fontSize=14, color="#666", align="left"),
                    c("heading", text="$20.46", level=3, color="#000", align="right"),
                    c("text", text="Delivery: $3.99", fontSize=14, color="#666"),
                    c("spacer", height=S16),
                    c("button", text="Proceed to Checkout - $24.45", variant="primary", fullWidth=True, size="lg"),
                    padding=S16,
                ),
            ),
            _screen(
                "orders",
                "Orders",
                "clipboard",
                c(
                    "section",
                    c(
                        "list",
                        variant="orders",
                        items=[
                            {"id": "ORD001", "date": "Jan 25, 2026", "status": "Delivered", "total": "$45.99", "itemCount": 5},
                            {"id": "ORD002", "date": "Jan 20, 2026", "status": "In Transit", "total": "$32.50", "itemCount": 3},
                            {"id": "ORD003", "date": "Jan 15, 2026", "status": "Delivered", "total": "$67.25", "itemCount": 8},
                        ],
                    ),
                    title="Your Orders",
                    padding=S16,
                ),
            ),
            _screen(
                "account",
                "Account",
                "user",
                _profile_header(c, "#F97316", "John Doe", "john@example.com"),
                c(
                    "list",
                    variant="menu",
                    items=[
                        {"icon": "package", "label": "My Orders", "action": "navigate:orders"},
                        {"icon": "map-pin", "label": "Delivery Addresses", "action": "navigate:addresses"},
                        {"icon": "credit-card", "label": "Payment Methods", "action": "navigate:payments"},
                        {"icon": "heart", "label": "Wishlist", "action": "navigate:wishlist"},
                        {"icon": "bell", "label": "Notifications", "action": "navigate:notifications"},
                        {"icon": "settings", "label": "Settings", "action": "navigate:settings"},
                        {"icon": "help-circle", "label": "Help & Support", "action": "navigate:support"},
                        {"icon": "log-out", "label": "Logout", "action": "logout", "color": "#EF4444"},
                    ],
                ),
            ),
        ),
    )


# =============================================================================
# Salon & Spa
# =============================================================================


def _salon() -> IndustryTemplate:
    c = _Components("salon")
    return IndustryTemplate(
        id="salon",
        name="Salon & Spa",
        description="Booking and services for beauty business",
        primary_color="#EC4899",
        secondary_color="#F472B6",
        icon="scissors",
        features=("bottomNav", "pushNotifications", "whatsappButton"),
        screens=(
            _screen(
                "home",
                "Home",
                "home",
                c(
                    "hero",
                    title="Glow Beauty Salon",
                    subtitle="Where beauty meets excellence",
                    buttonText="Book Now",
                    buttonAction="navigate:booking",
                    backgroundImage=_img("1560066984-138dadb4c035", 800),
                    overlayColor="rgba(236,72,153,0.7)",
                    height=300,
                ),
                c(
                    "section",
                    c(
                        "grid",
                        c("card", title="Haircut & Styling", subtitle="From $45", icon="scissors", backgroundColor="#FDF2F8"),
                        c("card", title="Hair Color", subtitle="From $85", icon="sparkles", backgroundColor="#FDF2F8"),
                        c("card", title="Facial Treatment", subtitle="From $65", icon="heart", backgroundColor="#FDF2F8"),
                        c("card", title="Nail Art", subtitle="From $35", icon="star", backgroundColor="#FDF2F8"),
                        columns=2,
                        gap=S16,
                    ),
                    title="Our Services",
                    padding=S16,
                ),
                c(
                    "section",
                    c(
                        "team",
                        members=[
                            {"name": "Sarah Johnson", "role": "Senior Stylist", "image": _img("1580618672591-eb180b1a973f", 300), "rating": 4.9},
                            {"name": "Emma Wilson", "role": "Color Specialist", "image": _img("1595959183082-7b570b7e08e2", 300), "rating": 4.8},
                            {"name": "Mia Davis", "role": "Nail Artist", "image": _img("1594744803329-e58b31de8bf5", 300), "rating": 4.9},
                        ],
                    ),
                    title="Meet Our Stylists",
                    padding=S16,
                ),
                c(
                    "section",
                    c(
                        "testimonial",
                        reviews=[
                            {"name": "Jessica M.", "text": "Best salon experience ever! Sarah is amazing with highlights.", "rating": 5},
                            {"name": "Amanda K.", "text": "Love my new look! Will definitely be coming back.", "rating": 5},
                        ],
                    ),
                    title="Client Reviews",
                    padding=S16,
                    backgroundColor="#FDF2F8",
                ),
                is_home=True,
            ),
            _screen(
                "services",
                "Services",
                "scissors",
                c(
                    "section",
                    c(
                        "list",
                        variant="service",
                        items=[
                            {"name": "Women's Haircut", "duration": "45 min", "price": "$55", "icon": "scissors"},
                            {"name": "Men's Haircut", "duration": "30 min", "price": "$35", "icon": "scissors"},
                            {"name": "Blowout & Styling", "duration": "45 min", "price": "$45", "icon": "sparkles"},
                            {"name": "Full Color", "duration": "2 hrs", "price": "$120", "icon": "sparkles"},
                            {"name": "Balayage", "duration": "3 hrs", "price": "$200", "icon": "star"},
                        ],
                    ),
                    title="Hair Services",
                    padding=S16,
                ),
                c(
                    "section",
                    c(
                        "list",
                        variant="service",
                        items=[
                            {"name": "Classic Facial", "duration": "60 min", "price": "$75", "icon": "heart"},
                            {"name": "Deep Cleansing", "duration": "75 min", "price": "$95", "icon": "sparkles"},
                            {"name": "Anti-Aging Treatment", "duration": "90 min", "price": "$125", "icon": "star"},
                        ],
                    ),
                    title="Spa & Facial",
                    padding=S16,
                ),
            ),
            _screen(
                "booking",
                "Book Now",
                "calendar",
                c(
                    "section",
                    c(
                        "contactForm",
                        fields=[
                            {"type": "select", "label": "Service", "placeholder": "Select a service", "options": ["Haircut", "Color", "Facial", "Nails"]},
                            {"type": "select", "label": "Stylist", "placeholder": "Select stylist", "options": ["Any Available", "Sarah Johnson", "Emma Wilson", "Mia Davis"]},
                            {"type": "date", "label": "Date", "placeholder": "Select date"},
                            {"type": "select", "label": "Time", "placeholder": "Select time", "options": ["9:00 AM", "11:00 AM", "1:00 PM", "3:00 PM"]},
                        ],
                        submitText="Book Appointment",
                        submitColor="#EC4899",
                    ),
                    title="Book Appointment",
                    padding=S16,
                ),
            ),
            _screen(
                "gallery",
                "Gallery",
                "image",
                c(
                    "grid",
                    c("image", src=_img("1522337360788-8b13dee7a37e"), borderRadius=8),
                    c("image", src=_img("1562322140-8baeececf3df"), borderRadius=8),
                    c("image", src=_img("1519699047748-de8e457a634e"), borderRadius=8),
                    c("image", src=_img("1487412947147-5cebf100ffc2"), borderRadius=8),
                    columns=2,
                    gap=S8,
                    padding=S8,
                ),
            ),
            _screen(
                "profile",
                "Profile",
                "user",
                _profile_header(c, "#EC4899", "Jessica Miller", "jessica@example.com"),
                c(
                    "list",
                    variant="menu",
                    items=[
                        {"icon": "calendar", "label": "My Appointments", "action": "navigate:appointments"},
                        {"icon": "heart", "label": "Favorite Stylists", "action": "navigate:favorites"},
                        {"icon": "gift", "label": "Rewards", "action": "navigate:rewards"},
                        {"icon": "settings", "label": "Settings", "action": "navigate:settings"},
                    ],
                ),
            ),
        ),
    )


# =============================================================================
# Restaurant
# =============================================================================


def _restaurant() -> IndustryTemplate:
    c = _Components("restaurant")
    return IndustryTemplate(
        id="restaurant",
        name="Restaurant",
        description="Menu, ordering, and reservations",
        primary_color="#EF4444",
        secondary_color="#FBBF24",
        icon="utensils",
        features=("bottomNav", "pushNotifications", "whatsappButton", "deepLinking"),
        screens=(
            _screen(
                "home",
                "Home",
                "home",
                c(
                    "hero",
                    title="Taste of Italy",
                    subtitle="Authentic Italian cuisine",
                    buttonText="View Menu",
                    buttonAction="navigate:menu",
                    backgroundImage=_img("1414235077428-338989a2e8c0", 800),
                    overlayColor="rgba(0,0,0,0.5)",
                    height=280,
                ),
                c(
                    "section",
                    c(
                        "carousel",
                        items=[
                            {"title": "Truffle Risotto", "subtitle": "$24.99", "image": _img("1476124369491-e7addf5db371", 600), "badge": "Chef's Pick"},
                            {"title": "Lobster Pasta", "subtitle": "$32.99", "image": _img("1563379926898-05f4575a45d8", 600), "badge": "New"},
                        ],
                    ),
                    title="Today's Specials",
                    padding=S16,
                ),
                c(
                    "section",
                    c(
                        "grid",
                        c("button", text="Order Online", icon="shopping-bag", variant="primary", action="navigate:cart"),
                        c("button", text="Reserve Table", icon="calendar", variant="outline", action="navigate:reservations"),
                        columns=2,
                        gap=S16,
                    ),
                    title="Quick Actions",
                    padding=S16,
                ),
                c(
                    "map",
                    address="123 Via Roma, Little Italy",
                    hours="Mon-Sun 11:00 AM - 10:00 PM",
                    height=180,
                ),
                is_home=True,
            ),
            _screen(
                "menu",
                "Menu",
                "utensils",
                c(
                    "section",
                    c(
                        "list",
                        variant="media",
                        items=[
                            {"name": "Bruschetta", "description": "Grilled bread with tomatoes & basil", "price": "$12.99", "image": _img("1572695157366-5e585ab2b69f", 200)},
                            {"name": "Calamari Fritti", "description": "Crispy fried calamari with marinara", "price": "$14.99", "image": _img("1599487488170-d11ec9c172f0", 200)},
                            {"name": "Caprese Salad", "description": "Fresh mozzarella, tomatoes, basil", "price": "$13.99", "image": _img("1608897013039-887f21d8c804", 200)},
                        ],
                    ),
                    title="Starters",
                    padding=S16,
                ),
                c(
                    "section",
                    c(
                        "list",
                        variant="media",
                        items=[
                            {"name": "Spaghetti Carbonara", "description": "Pancetta, egg, parmesan, black pepper", "price": "$18.99", "image": _img("1612874742237-6526221588e3", 200)},
                            {"name": "Fettuccine Alfredo", "description": "Creamy parmesan sauce", "price": "$17.99", "image": _img("1645112411341-6c4fd023714a", 200)},
                            {"name": "Penne Arrabbiata", "description": "Spicy tomato sauce with garlic", "price": "$16.99", "image": _img("1563379926898-05f4575a45d8", 200), "badge": "Spicy"},
                        ],
                    ),
                    title="Pasta",
                    padding=S16,
                ),
            ),
            _screen(
                "cart",
                "Order",
                "shopping-bag",
                c(
                    "section",
                    c(
                        "list",
                        variant="cart",
                        items=[
                            {"name": "Bruschetta", "price": "$12.99", "quantity": 1},
                            {"name": "Spaghetti Carbonara", "price": "$18.99", "quantity": 2},
                            {"name": "Tiramisu", "price": "$9.99", "quantity": 1},
                        ],
                    ),
                    title="Your Order",
                    padding=S16,
                ),
                c(
                    "container",
                    c("text", text="Total: $60.96", fontSize=16, align="right"),
                    c("spacer", height=S16),
                    c("button", text="Place Order", variant="primary", fullWidth=True, size="lg"),
                    padding=S16,
                ),
            ),
            _screen(
                "reservations",
                "Reserve",
                "calendar",
                c(
                    "section",
                    c(
                        "contactForm",
                        fields=[
                            {"type": "date", "label": "Date", "placeholder": "Select date"},
                            {"type": "select", "label": "Time", "options": ["6:00 PM", "7:00 PM", "8:00 PM", "9:00 PM"]},
                            {"type": "select", "label": "Guests", "options": ["1", "2", "3", "4", "5", "6+"]},
                            {"type": "text", "label": "Name", "placeholder": "Your name"},
                        ],
                        submitText="Reserve Table",
                    ),
                    title="Reserve a Table",
                    padding=S16,
                ),
            ),
            _screen(
                "account",
                "Account",
                "user",
                _profile_header(c, "#EF4444", "Marco Rossi", "marco@example.com"),
                c(
                    "list",
                    variant="menu",
                    items=[
                        {"icon": "clipboard", "label": "Order History", "action": "navigate:orders"},
                        {"icon": "heart", "label": "Favorites", "action": "navigate:favorites"},
                        {"icon": "map-pin", "label": "Addresses", "action": "navigate:addresses"},
                        {"icon": "settings", "label": "Settings", "action": "navigate:settings"},
                    ],
                ),
            ),
        ),
    )


# =============================================================================
# Church & Ministry
# =============================================================================


def _church() -> IndustryTemplate:
    c = _Components("church")
    return IndustryTemplate(
        id="church",
        name="Church & Ministry",
        description="Sermons, events, and community",
        primary_color="#8B5CF6",
        secondary_color="#A78BFA",
        icon="church",
        features=("pushNotifications", "offlineScreen"),
        screens=(
            _screen(
                "home",
                "Home",
                "home",
                c(
                    "hero",
                    title="Grace Community Church",
                    subtitle="Welcome home",
                    buttonText="Watch Live",
                    buttonAction="navigate:sermons",
                    backgroundImage=_img("1438232992991-995b7058bbb3", 800),
                    overlayColor="rgba(139,92,246,0.6)",
                    height=280,
                ),
                c(
                    "section",
                    c(
                        "card",
                        title="Sunday Service",
                        subtitle="9:00 AM & 11:00 AM",
                        description="Join us for worship and the Word",
                        icon="church",
                    ),
                    c("spacer", height=S8),
                    c(
                        "card",
                        title="Youth Night",
                        subtitle="Wednesday 7:00 PM",
                        description="Games, worship and small groups",
                        icon="users",
                    ),
                    title="This Week",
                    padding=S16,
                ),
                c(
                    "section",
                    c(
                        "stats",
                        items=[
                            {"label": "Members", "value": "1,200"},
                            {"label": "Small Groups", "value": "45"},
                            {"label": "Ministries", "value": "12"},
                        ],
                    ),
                    title="Our Community",
                    padding=S16,
                ),
                is_home=True,
            ),
            _screen(
                "sermons",
                "Sermons",
                "play",
                c(
                    "section",
                    c(
                        "list",
                        variant="media",
                        items=[
                            {"title": "Walking in Faith", "subtitle": "Pastor John - Jan 26", "image": _img("1504052434569-70ad5836ab65", 200)},
                            {"title": "The Power of Prayer", "subtitle": "Pastor John - Jan 19", "image": _img("1507692049790-de58290a4334", 200)},
                            {"title": "Love Your Neighbor", "subtitle": "Pastor Mary - Jan 12", "image": _img("1473177104440-ffee2f376098", 200)},
                        ],
                    ),
                    title="Recent Sermons",
                    padding=S16,
                ),
            ),
            _screen(
                "events",
                "Events",
                "calendar",
                c(
                    "section",
                    c(
                        "list",
                        variant="menu",
                        items=[
                            {"icon": "users", "label": "Men's Breakfast", "subtitle": "Sat, Feb 1 - 8:00 AM"},
                            {"icon": "heart", "label": "Women's Bible Study", "subtitle": "Tue, Feb 4 - 7:00 PM"},
                            {"icon": "gift", "label": "Community Outreach", "subtitle": "Sat, Feb 8 - 10:00 AM"},
                        ],
                    ),
                    title="Upcoming Events",
                    padding=S16,
                ),
            ),
            _screen(
                "give",
                "Give",
                "heart",
                c(
                    "container",
                    c("heading", text="Support Our Mission", level=2, align="center"),
                    c("text", text="Your generosity helps us serve our community.", align="center"),
                    c("spacer", height=S24),
                    c(
                        "grid",
                        c("button", text="$25", variant="outline"),
                        c("button", text="$50", variant="outline"),
                        c("button", text="$100", variant="outline"),
                        columns=3,
                        gap=S8,
                    ),
                    c("spacer", height=S16),
                    c("button", text="Give Now", icon="credit-card", variant="primary", fullWidth=True, size="lg"),
                    padding=S24,
                ),
            ),
            _screen(
                "connect",
                "Connect",
                "users",
                c(
                    "list",
                    variant="menu",
                    items=[
                        {"icon": "users", "label": "Join a Small Group", "action": "navigate:groups"},
                        {"icon": "heart", "label": "Prayer Requests", "action": "navigate:prayer"},
                        {"icon": "star", "label": "Volunteer", "action": "navigate:volunteer"},
                        {"icon": "phone", "label": "Contact Us", "action": "navigate:contact"},
                    ],
                ),
                c("socialLinks", links=[{"platform": "facebook", "url": "https://facebook.com"}, {"platform": "youtube", "url": "https://youtube.com"}]),
            ),
        ),
    )


# =============================================================================
# Fitness & Gym
# =============================================================================


def _fitness() -> IndustryTemplate:
    c = _Components("fitness")
    return IndustryTemplate(
        id="fitness",
        name="Fitness & Gym",
        description="Workouts, classes, and progress tracking",
        primary_color="#10B981",
        secondary_color="#34D399",
        icon="dumbbell",
        features=("bottomNav", "pushNotifications", "deepLinking"),
        screens=(
            _screen(
                "home",
                "Home",
                "home",
                c(
                    "container",
                    c("text", text="Good morning, Alex!", fontSize=14, color="#fff", opacity=0.8),
                    c("heading", text="Ready to crush it?", level=2, color="#fff"),
                    padding=S24,
                    backgroundColor="#10B981",
                ),
                c(
                    "section",
                    c(
                        "stats",
                        items=[
                            {"label": "Calories", "value": "1,250", "icon": "activity", "target": "2,000"},
                            {"label": "Workouts", "value": "3", "icon": "dumbbell", "target": "5"},
                            {"label": "Steps", "value": "8,432", "icon": "trending-up", "target": "10,000"},
                        ],
                    ),
                    title="Today's Stats",
                    padding=S16,
                ),
                c(
                    "section",
                    c(
                        "carousel",
                        items=[
                            {"title": "Full Body HIIT", "subtitle": "30 min - Intermediate", "image": _img("1517836357463-d25dfeac3438", 600)},
                            {"title": "Core Strength", "subtitle": "20 min - Beginner", "image": _img("1571019614242-c5c5dee9f50b", 600)},
                        ],
                    ),
                    title="Recommended Workouts",
                    padding=S16,
                ),
                is_home=True,
            ),
            _screen(
                "workouts",
                "Workouts",
                "dumbbell",
                c(
                    "container",
                    c("input", placeholder="Search workouts...", type="search", icon="search"),
                    padding=S16,
                ),
                c(
                    "grid",
                    c("card", title="Strength", subtitle="24 workouts", icon="dumbbell"),
                    c("card", title="Cardio", subtitle="18 workouts", icon="activity"),
                    c("card", title="Yoga", subtitle="12 workouts", icon="heart"),
                    c("card", title="HIIT", subtitle="15 workouts", icon="trending-up"),
                    columns=2,
                    gap=S16,
                    padding=S16,
                ),
            ),
            _screen(
                "classes",
                "Classes",
                "calendar",
                c(
                    "section",
                    c(
                        "list",
                        variant="menu",
                        items=[
                            {"icon": "clock", "label": "Spin Class", "subtitle": "6:00 AM - Studio A"},
                            {"icon": "clock", "label": "Power Yoga", "subtitle": "9:00 AM - Studio B"},
                            {"icon": "clock", "label": "Boxing", "subtitle": "6:00 PM - Ring"},
                        ],
                    ),
                    title="Today's Classes",
                    padding=S16,
                ),
            ),
            _screen(
                "progress",
                "Progress",
                "trending-up",
                c(
                    "section",
                    c(
                        "stats",
                        items=[
                            {"label": "Weight", "value": "165 lbs", "change": "-5 lbs"},
                            {"label": "Body Fat", "value": "18%", "change": "-2%"},
                            {"label": "Workouts", "value": "48", "change": "+12"},
                        ],
                    ),
                    title="This Month",
                    padding=S16,
                ),
            ),
            _screen(
                "profile",
                "Profile",
                "user",
                _profile_header(c, "#10B981", "Alex Carter", "alex@example.com"),
                c(
                    "list",
                    variant="menu",
                    items=[
                        {"icon": "award", "label": "Achievements", "action": "navigate:achievements"},
                        {"icon": "credit-card", "label": "Membership", "action": "navigate:membership"},
                        {"icon": "settings", "label": "Settings", "action": "navigate:settings"},
                    ],
                ),
            ),
        ),
    )


# =============================================================================
# Education & Courses
# =============================================================================


def _education() -> IndustryTemplate:
    c = _Components("education")
    return IndustryTemplate(
        id="education",
        name="Education & Courses",
        description="Online learning platform",
        primary_color="#3B82F6",
        secondary_color="#60A5FA",
        icon="graduation-cap",
        features=("bottomNav", "pushNotifications", "offlineScreen"),
        screens=(
            _screen(
                "home",
                "Home",
                "home",
                c(
                    "container",
                    c("text", text="Welcome back, Student!", fontSize=14, color="#fff", opacity=0.8),
                    c("heading", text="Continue Learning", level=2, color="#fff"),
                    padding=S24,
                    backgroundColor="#3B82F6",
                ),
                c(
                    "section",
                    c(
                        "card",
                        title="Web Development Bootcamp",
                        subtitle="Lesson 24 of 50",
                        progress=48,
                        image=_img("1498050108023-c5249f4df085", 400),
                    ),
                    title="In Progress",
                    padding=S16,
                ),
                c(
                    "section",
                    c(
                        "grid",
                        c("card", title="Programming", icon="book", compact=True),
                        c("card", title="Design", icon="image", compact=True),
                        c("card", title="Business", icon="briefcase", compact=True),
                        c("card", title="Languages", icon="globe", compact=True),
                        columns=2,
                        gap=S16,
                    ),
                    title="Categories",
                    padding=S16,
                ),
                is_home=True,
            ),
            _screen(
                "courses",
                "Courses",
                "book-open",
                c(
                    "section",
                    c(
                        "list",
                        variant="media",
                        items=[
                            {"title": "Python for Beginners", "subtitle": "32 lessons - 4.8 rating", "image": _img("1526379095098-d400fd0bf935", 200)},
                            {"title": "UI/UX Design Masterclass", "subtitle": "28 lessons - 4.9 rating", "image": _img("1561070791-2526d30994b5", 200)},
                            {"title": "Digital Marketing", "subtitle": "20 lessons - 4.7 rating", "image": _img("1460925895917-afdab827c52f", 200)},
                        ],
                    ),
                    title="Popular Courses",
                    padding=S16,
                ),
            ),
            _screen(
                "learning",
                "My Learning",
                "graduation-cap",
                c(
                    "section",
                    c(
                        "stats",
                        items=[
                            {"label": "Courses", "value": "4"},
                            {"label": "Hours", "value": "36"},
                            {"label": "Certificates", "value": "2"},
                        ],
                    ),
                    title="Your Progress",
                    padding=S16,
                ),
            ),
            _screen(
                "profile",
                "Profile",
                "user",
                _profile_header(c, "#3B82F6", "Sam Lee", "sam@example.com"),
                c(
                    "list",
                    variant="menu",
                    items=[
                        {"icon": "award", "label": "Certificates", "action": "navigate:certificates"},
                        {"icon": "bookmark", "label": "Saved Courses", "action": "navigate:saved"},
                        {"icon": "settings", "label": "Settings", "action": "navigate:settings"},
                    ],
                ),
            ),
        ),
    )


# =============================================================================
# Online Radio
# =============================================================================


def _radio() -> IndustryTemplate:
    c = _Components("radio")
    return IndustryTemplate(
        id="radio",
        name="Online Radio",
        description="Live streaming and podcasts",
        primary_color="#06B6D4",
        secondary_color="#22D3EE",
        icon="radio",
        features=("pushNotifications", "offlineScreen"),
        screens=(
            _screen(
                "home",
                "Live",
                "radio",
                c(
                    "container",
                    c("image", src=_img("1493225457124-a3eb161ffa5f", 300), width=200, height=200, borderRadius=16),
                    c("spacer", height=S24),
                    c("heading", text="Wave FM", level=2, color="#fff"),
                    c("text", text="LIVE NOW", fontSize=14, color="#fff", badge=True),
                    c("spacer", height=S8),
                    c("text", text="Morning Show with DJ Alex", fontSize=16, color="#fff"),
                    c("spacer", height=S24),
                    c(
                        "grid",
                        c("button", icon="play", variant="primary", circular=True, size="lg", action="play"),
                        columns=1,
                        gap=S16,
                    ),
                    padding=S32,
                    backgroundColor="#06B6D4",
                    align="center",
                ),
                c(
                    "section",
                    c(
                        "list",
                        variant="media",
                        items=[
                            {"title": "Blinding Lights", "subtitle": "The Weeknd"},
                            {"title": "Levitating", "subtitle": "Dua Lipa"},
                        ],
                    ),
                    title="Recently Played",
                    padding=S16,
                ),
                is_home=True,
            ),
            _screen(
                "podcasts",
                "Podcasts",
                "mic",
                c(
                    "section",
                    c(
                        "list",
                        variant="media",
                        items=[
                            {"title": "Tech Talk Weekly", "subtitle": "45 min - Episode 112", "image": _img("1478737270239-2f02b77fc618", 200)},
                            {"title": "Music Stories", "subtitle": "30 min - Episode 48", "image": _img("1511671782779-c97d3d27a1d4", 200)},
                        ],
                    ),
                    title="Latest Episodes",
                    padding=S16,
                ),
            ),
            _screen(
                "schedule",
                "Schedule",
                "clock",
                c(
                    "section",
                    c(
                        "list",
                        variant="menu",
                        items=[
                            {"icon": "headphones", "label": "Morning Show", "subtitle": "6:00 AM - 10:00 AM"},
                            {"icon": "music", "label": "Midday Mix", "subtitle": "10:00 AM - 2:00 PM"},
                            {"icon": "mic", "label": "Afternoon Drive", "subtitle": "2:00 PM - 6:00 PM"},
                        ],
                    ),
                    title="Today's Schedule",
                    padding=S16,
                ),
            ),
            _screen(
                "about",
                "About",
                "info",
                c(
                    "container",
                    c("heading", text="About Us", level=2),
                    c("text", text="Wave FM has been playing the best hits around the clock since 2010."),
                    padding=S16,
                ),
                c("socialLinks", links=[{"platform": "instagram", "url": "https://instagram.com"}, {"platform": "twitter", "url": "https://twitter.com"}]),
            ),
        ),
    )


# =============================================================================
# Healthcare & Clinic
# =============================================================================


def _healthcare() -> IndustryTemplate:
    c = _Components("healthcare")
    return IndustryTemplate(
        id="healthcare",
        name="Healthcare & Clinic",
        description="Appointments and health services",
        primary_color="#F43F5E",
        secondary_color="#FB7185",
        icon="stethoscope",
        features=("bottomNav", "pushNotifications"),
        screens=(
            _screen(
                "home",
                "Home",
                "home",
                c(
                    "container",
                    c("text", text="Welcome back!", fontSize=14, color="#fff", opacity=0.8),
                    c("heading", text="How can we help you today?", level=3, color="#fff"),
                    padding=S24,
                    backgroundColor="#F43F5E",
                ),
                c(
                    "section",
                    c(
                        "grid",
                        c("card", title="Book Appointment", icon="calendar", backgroundColor="#FFF1F2", action="navigate:book"),
                        c("card", title="Find Doctor", icon="stethoscope", backgroundColor="#FFF1F2", action="navigate:doctors"),
                        c("card", title="Lab Results", icon="file-text", backgroundColor="#FFF1F2", action="navigate:records"),
                        c("card", title="Prescriptions", icon="clipboard", backgroundColor="#FFF1F2", action="navigate:records"),
                        columns=2,
                        gap=S16,
                    ),
                    title="Quick Actions",
                    padding=S16,
                ),
                is_home=True,
            ),
            _screen(
                "doctors",
                "Doctors",
                "stethoscope",
                c(
                    "section",
                    c(
                        "team",
                        members=[
                            {"name": "Dr. Sarah Johnson", "role": "General Medicine", "rating": 4.9, "image": _img("1559839734-2b71ea197ec2", 200)},
                            {"name": "Dr. Michael Chen", "role": "Cardiology", "rating": 4.8, "image": _img("1612349317150-e413f6a5b16d", 200)},
                            {"name": "Dr. Emily Davis", "role": "Pediatrics", "rating": 4.9, "image": _img("1594824476967-48c8b964273f", 200)},
                        ],
                    ),
                    title="Our Doctors",
                    padding=S16,
                ),
            ),
            _screen(
                "book",
                "Book",
                "calendar",
                c(
                    "section",
                    c(
                        "contactForm",
                        fields=[
                            {"type": "select", "label": "Department", "options": ["General", "Cardiology", "Pediatrics"]},
                            {"type": "date", "label": "Date", "placeholder": "Select date"},
                            {"type": "textarea", "label": "Reason for visit"},
                        ],
                        submitText="Request Appointment",
                    ),
                    title="Book an Appointment",
                    padding=S16,
                ),
            ),
            _screen(
                "records",
                "Records",
                "file-text",
                c(
                    "section",
                    c(
                        "list",
                        variant="menu",
                        items=[
                            {"icon": "file-text", "label": "Blood Test Results", "subtitle": "Jan 20, 2026"},
                            {"icon": "clipboard", "label": "Annual Checkup", "subtitle": "Dec 5, 2025"},
                            {"icon": "activity", "label": "ECG Report", "subtitle": "Nov 12, 2025"},
                        ],
                    ),
                    title="Medical Records",
                    padding=S16,
                ),
            ),
            _screen(
                "profile",
                "Profile",
                "user",
                _profile_header(c, "#F43F5E", "Jordan Smith", "jordan@example.com"),
                c(
                    "list",
                    variant="menu",
                    items=[
                        {"icon": "calendar", "label": "My Appointments", "action": "navigate:appointments"},
                        {"icon": "credit-card", "label": "Insurance", "action": "navigate:insurance"},
                        {"icon": "settings", "label": "Settings", "action": "navigate:settings"},
                    ],
                ),
            ),
        ),
    )


# =============================================================================
# Real Estate
# =============================================================================


def _realestate() -> IndustryTemplate:
    c = _Components("realestate")
    listings = [
        {"id": "1", "name": "Modern Family Home", "price": "$549,000", "image": _img("1600596542815-ffad4c1539a9"), "badge": "New"},
        {"id": "2", "name": "Downtown Loft", "price": "$2,400/mo", "image": _img("1502672260266-1c1ef2d93688"), "badge": "Rent"},
        {"id": "3", "name": "Lakeside Cottage", "price": "$389,000", "image": _img("1568605114967-8130f3a36994")},
        {"id": "4", "name": "City Apartment", "price": "$299,000", "image": _img("1545324418-cc1a3fa10c00")},
    ]
    return IndustryTemplate(
        id="realestate",
        name="Real Estate",
        description="Property listings and tours",
        primary_color="#64748B",
        secondary_color="#94A3B8",
        icon="building",
        features=("bottomNav", "deepLinking", "whatsappButton"),
        screens=(
            _screen(
                "home",
                "Home",
                "home",
                c(
                    "container",
                    c("heading", text="Find Your Dream Home", level=2, color="#fff"),
                    c("spacer", height=S16),
                    c("input", placeholder="Search location, city, or ZIP...", type="search", backgroundColor="#fff"),
                    padding=S24,
                    backgroundColor="#64748B",
                ),
                c(
                    "container",
                    c(
                        "grid",
                        c("button", text="Buy", variant="primary", size="sm"),
                        c("button", text="Rent", variant="outline", size="sm"),
                        c("button", text="New", variant="outline", size="sm"),
                        c("button", text="Sold", variant="outline", size="sm"),
                        columns=4,
                        gap=S8,
                    ),
                    padding=S16,
                ),
                c(
                    "section",
                    c("productGrid", columns=2, products=listings),
                    title="Featured Properties",
                    padding=S16,
                ),
                is_home=True,
            ),
            _screen(
                "search",
                "Search",
                "search",
                c(
                    "container",
                    c("input", placeholder="City, neighborhood or ZIP", type="search", icon="search"),
                    padding=S16,
                ),
                c("map", address="San Francisco, CA", height=240),
                c("productGrid", columns=2, products=listings),
            ),
            _screen(
                "saved",
                "Saved",
                "heart",
                c(
                    "section",
                    c("productGrid", columns=1, products=listings[:2]),
                    title="Saved Homes",
                    padding=S16,
                ),
            ),
            _screen(
                "contact",
                "Contact",
                "phone",
                c(
                    "container",
                    c("heading", text="Contact Us", level=2),
                    c("text", text="Our agents are ready to help you buy, sell or rent."),
                    padding=S16,
                ),
                c(
                    "contactForm",
                    fields=[
                        {"type": "text", "label": "Name"},
                        {"type": "email", "label": "Email"},
                        {"type": "textarea", "label": "Message"},
                    ],
                    submitText="Send Message",
                    padding=S16,
                ),
            ),
        ),
    )


# =============================================================================
# Photography Portfolio
# =============================================================================


def _photography() -> IndustryTemplate:
    c = _Components("photography")
    return IndustryTemplate(
        id="photography",
        name="Photography Portfolio",
        description="Portfolio, booking, and client galleries",
        primary_color="#6366F1",
        secondary_color="#818CF8",
        icon="camera",
        features=("bottomNav", "whatsappButton"),
        screens=(
            _screen(
                "home",
                "Portfolio",
                "image",
                c(
                    "hero",
                    title="Capture Your Moments",
                    subtitle="Professional Photography Services",
                    buttonText="View Portfolio",
                    buttonAction="navigate:gallery",
                    backgroundImage=_img("1452587925148-ce544e77e70d", 800),
                    overlayColor="rgba(0,0,0,0.4)",
                    height=320,
                ),
                c(
                    "section",
                    c(
                        "grid",
                        c("image", src=_img("1519741497674-611481863552"), borderRadius=8),
                        c("image", src=_img("1511285560929-80b456fea0bc"), borderRadius=8),
                        c("image", src=_img("1506905925346-21bda4d32df4"), borderRadius=8),
                        c("image", src=_img("1494790108377-be9c29b29330"), borderRadius=8),
                        columns=2,
                        gap=S8,
                    ),
                    title="Featured Work",
                    padding=S16,
                ),
                is_home=True,
            ),
            _screen(
                "gallery",
                "Gallery",
                "grid",
                c(
                    "carousel",
                    items=[
                        {"title": "Weddings", "image": _img("1519741497674-611481863552", 600)},
                        {"title": "Portraits", "image": _img("1494790108377-be9c29b29330", 600)},
                        {"title": "Landscapes", "image": _img("1506905925346-21bda4d32df4", 600)},
                    ],
                ),
            ),
            _screen(
                "packages",
                "Packages",
                "tag",
                c(
                    "section",
                    c("card", title="Portrait Session", subtitle="$199 - 1 hour", icon="user"),
                    c("spacer", height=S8),
                    c("card", title="Event Coverage", subtitle="$599 - 4 hours", icon="calendar"),
                    c("spacer", height=S8),
                    c("card", title="Wedding Package", subtitle="$2,499 - Full day", icon="heart"),
                    title="Packages",
                    padding=S16,
                ),
            ),
            _screen(
                "book",
                "Book Now",
                "calendar",
                c(
                    "section",
                    c(
                        "contactForm",
                        fields=[
                            {"type": "select", "label": "Package", "options": ["Portrait", "Event", "Wedding"]},
                            {"type": "date", "label": "Preferred date"},
                            {"type": "email", "label": "Email"},
                        ],
                        submitText="Request Booking",
                    ),
                    title="Book a Session",
                    padding=S16,
                ),
            ),
            _screen(
                "about",
                "About",
                "info",
                c(
                    "container",
                    c("image", src=_img("1554080353-a576cf803bda", 300), width=120, height=120, borderRadius=60),
                    c("spacer", height=S16),
                    c("heading", text="About Us", level=2),
                    c("text", text="Award-winning photographers telling your story through light."),
                    padding=S24,
                    align="center",
                ),
                c(
                    "stats",
                    items=[
                        {"label": "Clients", "value": "500+"},
                        {"label": "Weddings", "value": "120"},
                        {"label": "Awards", "value": "15"},
                    ],
                ),
            ),
        ),
    )


# =============================================================================
# Music & Band
# =============================================================================


def _music() -> IndustryTemplate:
    c = _Components("music")
    return IndustryTemplate(
        id="music",
        name="Music & Band",
        description="Music, tours, and merchandise",
        primary_color="#EC4899",
        secondary_color="#F472B6",
        icon="music",
        features=("bottomNav", "pushNotifications", "deepLinking"),
        screens=(
            _screen(
                "home",
                "Home",
                "home",
                c(
                    "hero",
                    title="The Midnight Echo",
                    subtitle="New Album Out Now",
                    buttonText="Listen Now",
                    buttonAction="navigate:music",
                    backgroundImage=_img("1501386761578-eac5c94b800a", 800),
                    overlayColor="rgba(0,0,0,0.5)",
                    height=320,
                ),
                c(
                    "section",
                    c(
                        "card",
                        title="Neon Dreams",
                        subtitle="Full Album - 12 Tracks",
                        image=_img("1493225457124-a3eb161ffa5f", 400),
                        icon="play",
                    ),
                    title="Latest Release",
                    padding=S16,
                ),
                is_home=True,
            ),
            _screen(
                "music",
                "Music",
                "headphones",
                c(
                    "section",
                    c(
                        "list",
                        variant="media",
                        items=[
                            {"title": "Neon Dreams", "subtitle": "3:45"},
                            {"title": "City Lights", "subtitle": "4:12"},
                            {"title": "After Midnight", "subtitle": "3:58"},
                        ],
                    ),
                    title="Tracks",
                    padding=S16,
                ),
            ),
            _screen(
                "tour",
                "Tour",
                "map-pin",
                c(
                    "section",
                    c(
                        "list",
                        variant="menu",
                        items=[
                            {"icon": "map-pin", "label": "Los Angeles - The Wiltern", "subtitle": "Mar 12"},
                            {"icon": "map-pin", "label": "Chicago - House of Blues", "subtitle": "Mar 18"},
                            {"icon": "map-pin", "label": "New York - Terminal 5", "subtitle": "Mar 25"},
                        ],
                    ),
                    title="Upcoming Shows",
                    padding=S16,
                ),
            ),
            _screen(
                "merch",
                "Merch",
                "shopping-bag",
                c(
                    "productGrid",
                    columns=2,
                    products=[
                        {"id": "1", "name": "Tour T-Shirt", "price": "$30", "image": _img("1521572163474-6864f9cf17ab")},
                        {"id": "2", "name": "Neon Dreams Vinyl", "price": "$35", "image": _img("1539375665275-f9de415ef9ac")},
                    ],
                ),
            ),
            _screen(
                "about",
                "About",
                "info",
                c(
                    "container",
                    c("heading", text="About Us", level=2),
                    c("text", text="Four friends making synth-driven rock since 2015."),
                    padding=S16,
                ),
                c("socialLinks", links=[{"platform": "spotify", "url": "https://spotify.com"}, {"platform": "instagram", "url": "https://instagram.com"}]),
            ),
        ),
    )


# =============================================================================
# Business Services
# =============================================================================


def _business() -> IndustryTemplate:
    c = _Components("business")
    return IndustryTemplate(
        id="business",
        name="Business Services",
        description="Professional services and consulting",
        primary_color="#1E40AF",
        secondary_color="#3B82F6",
        icon="briefcase",
        features=("whatsappButton", "deepLinking"),
        screens=(
            _screen(
                "home",
                "Home",
                "home",
                c(
                    "hero",
                    title="Expert Business Solutions",
                    subtitle="Transform your business with our expertise",
                    buttonText="Get Started",
                    buttonAction="navigate:contact",
                    backgroundImage=_img("1497366216548-37526070297c", 800),
                    overlayColor="rgba(30,64,175,0.7)",
                    height=300,
                ),
                c(
                    "section",
                    c(
                        "grid",
                        c("card", title="Consulting", subtitle="Strategic planning", icon="trending-up", backgroundColor="#EFF6FF"),
                        c("card", title="Marketing", subtitle="Digital solutions", icon="globe", backgroundColor="#EFF6FF"),
                        c("card", title="Development", subtitle="Custom software", icon="settings", backgroundColor="#EFF6FF"),
                        c("card", title="Support", subtitle="24/7 assistance", icon="help-circle", backgroundColor="#EFF6FF"),
                        columns=2,
                        gap=S16,
                    ),
                    title="Our Services",
                    padding=S16,
                ),
                c(
                    "stats",
                    items=[
                        {"label": "Clients", "value": "250+"},
                        {"label": "Projects", "value": "1,000+"},
                        {"label": "Years", "value": "15"},
                    ],
                    padding=S16,
                ),
                is_home=True,
            ),
            _screen(
                "services",
                "Services",
                "briefcase",
                c(
                    "section",
                    c(
                        "list",
                        variant="menu",
                        items=[
                            {"icon": "trending-up", "label": "Business Strategy"},
                            {"icon": "globe", "label": "Digital Marketing"},
                            {"icon": "settings", "label": "Software Development"},
                            {"icon": "users", "label": "Team Training"},
                        ],
                    ),
                    title="What We Do",
                    padding=S16,
                ),
            ),
            _screen(
                "team",
                "Team",
                "users",
                c(
                    "section",
                    c(
                        "team",
                        members=[
                            {"name": "Robert Hayes", "role": "CEO", "image": _img("1560250097-0b93528c311a", 200)},
                            {"name": "Linda Park", "role": "Head of Strategy", "image": _img("1573496359142-b8d87734a5a2", 200)},
                        ],
                    ),
                    title="Leadership",
                    padding=S16,
                ),
            ),
            _screen(
                "contact",
                "Contact",
                "mail",
                c(
                    "container",
                    c("heading", text="Contact Us", level=2),
                    c("text", text="Tell us about your project and we'll get back within one business day."),
                    padding=S16,
                ),
                c(
                    "contactForm",
                    fields=[
                        {"type": "text", "label": "Name"},
                        {"type": "email", "label": "Email"},
                        {"type": "text", "label": "Company"},
                        {"type": "textarea", "label": "Message"},
                    ],
                    submitText="Send Inquiry",
                    padding=S16,
                ),
                c("map", address="500 Market St, Suite 100", height=180),
            ),
        ),
    )


# =============================================================================
# News & Blog
# =============================================================================


def _news() -> IndustryTemplate:
    c = _Components("news")
    return IndustryTemplate(
        id="news",
        name="News & Blog",
        description="Articles, categories, and notifications",
        primary_color="#DC2626",
        secondary_color="#EF4444",
        icon="newspaper",
        features=("bottomNav", "pushNotifications", "offlineScreen", "deepLinking"),
        screens=(
            _screen(
                "home",
                "Feed",
                "newspaper",
                c(
                    "carousel",
                    items=[
                        {"title": "Breaking: Major Tech Announcement", "subtitle": "Read full story", "image": _img("1504711434969-e33886168f5c", 600), "badge": "Breaking"},
                        {"title": "Markets Hit Record High", "subtitle": "Financial update", "image": _img("1611974789855-9c2a0a7236a3", 600)},
                    ],
                ),
                c(
                    "section",
                    c(
                        "list",
                        variant="media",
                        items=[
                            {"title": "New Climate Report Released", "subtitle": "Environment - 2h ago", "image": _img("1569163139599-0f4517e36f31", 200)},
                            {"title": "Economic Outlook 2026", "subtitle": "Business - 5h ago", "image": _img("1611974789855-9c2a0a7236a3", 200)},
                        ],
                    ),
                    title="Top Stories",
                    padding=S16,
                ),
                c(
                    "section",
                    c(
                        "grid",
                        c("button", text="World", variant="outline", size="sm"),
                        c("button", text="Business", variant="outline", size="sm"),
                        c("button", text="Sports", variant="outline", size="sm"),
                        c("button", text="Entertainment", variant="outline", size="sm"),
                        columns=4,
                        gap=S8,
                        scrollable=True,
                    ),
                    title="Categories",
                    padding=S16,
                ),
                is_home=True,
            ),
            _screen(
                "categories",
                "Categories",
                "folder",
                c(
                    "section",
                    c(
                        "list",
                        variant="menu",
                        items=[
                            {"icon": "globe", "label": "World News", "badge": "125"},
                            {"icon": "briefcase", "label": "Business & Finance", "badge": "89"},
                            {"icon": "activity", "label": "Health", "badge": "38"},
                        ],
                    ),
                    title="Browse by Category",
                    padding=S16,
                ),
            ),
            _screen(
                "saved",
                "Saved",
                "bookmark",
                c(
                    "section",
                    c(
                        "list",
                        variant="media",
                        items=[
                            {"title": "How AI is Changing Healthcare", "subtitle": "Tech - Saved yesterday", "image": _img("1576091160399-112ba8d25d1d", 200)},
                            {"title": "Investment Guide 2026", "subtitle": "Finance - Saved 2 days ago", "image": _img("1611974789855-9c2a0a7236a3", 200)},
                        ],
                    ),
                    title="Saved Articles",
                    subtitle="2 articles",
                    padding=S16,
                ),
            ),
            _screen(
                "settings",
                "Settings",
                "settings",
                c(
                    "section",
                    c(
                        "list",
                        variant="menu",
                        items=[
                            {"icon": "bell", "label": "Notifications", "action": "navigate:notifications"},
                            {"icon": "book-open", "label": "Offline Reading", "action": "navigate:offline"},
                            {"icon": "mail", "label": "Newsletter", "action": "navigate:newsletter"},
                            {"icon": "help-circle", "label": "Help & Support", "action": "navigate:help"},
                        ],
                    ),
                    title="Preferences",
                    padding=S16,
                ),
            ),
        ),
    )


# =============================================================================
# Catalog
# =============================================================================

_BUILDERS = (
    _ecommerce,
    _salon,
    _restaurant,
    _church,
    _fitness,
    _education,
    _radio,
    _healthcare,
    _realestate,
    _photography,
    _music,
    _business,
    _news,
)

ALL_TEMPLATES: MappingProxyType[str, IndustryTemplate] = MappingProxyType(
    {template.id: template for template in (build() for build in _BUILDERS)}
)

TEMPLATE_SUBTITLES: MappingProxyType[str, str] = MappingProxyType(
    {
        "ecommerce": "Shop the best products online",
        "salon": "Book your perfect appointment",
        "restaurant": "Delicious food, delivered fresh",
        "church": "Join our community of faith",
        "fitness": "Transform your body and mind",
        "education": "Learn something new today",
        "healthcare": "Your health, our priority",
        "realestate": "Find your dream home",
        "photography": "Capturing moments that matter",
        "music": "Feel the rhythm",
        "business": "Professional services for you",
        "news": "Stay informed, stay ahead",
        "radio": "Tune in to great music",
    }
)


__all__ = ["ALL_TEMPLATES", "TEMPLATE_SUBTITLES"]
