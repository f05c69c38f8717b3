"""
Fixed development dataset.

Rows are shaped exactly like the Supabase tables (ISO-8601 strings, free-text
statuses, JSON item lists) so the services exercise the same normalization
path as in production. A few rows are intentionally irregular: a legacy stage
string, a legacy lead source, a submission whose profile is missing, and a
selection item without price or quantity.

The dataset is anchored around 2024-12-23 (UTC).
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List

_PROFILES: List[Dict[str, Any]] = [
    {
        "id": "p-richardson",
        "email": "james@richardson.com",
        "first_name": "James",
        "last_name": "Richardson",
        "phone": "020 7123 4567",
        "account_number": "HOC-1001",
        "account_type": "trade",
        "lead_source": "website_signup",
        "interest_level": "hot",
        "created_at": "2024-11-02T09:15:00Z",
        "updated_at": "2024-12-15T10:00:00Z",
    },
    {
        "id": "p-mitchell",
        "email": "sarah@mitchellhome.co.uk",
        "first_name": "Sarah",
        "last_name": "Mitchell",
        "phone": "020 8234 5678",
        "account_number": "HOC-1002",
        "account_type": "private",
        "lead_source": "referral",
        "interest_level": "warm",
        "created_at": "2024-11-10T14:30:00Z",
        "updated_at": "2024-12-18T08:45:00Z",
    },
    {
        "id": "p-thompson",
        "email": "david.t@email.com",
        "first_name": "David",
        "last_name": "Thompson",
        "phone": "07700 900123",
        "account_number": "HOC-1003",
        "account_type": "private",
        "lead_source": "phone",
        "interest_level": "hot",
        "created_at": "2024-10-20T11:00:00Z",
        "updated_at": "2024-12-01T16:20:00Z",
    },
    {
        "id": "p-wilson",
        "email": "emma.wilson@gmail.com",
        "first_name": "Emma",
        "last_name": None,
        "phone": "07700 900456",
        "account_number": "HOC-1004",
        "account_type": "private",
        "lead_source": "social",
        "interest_level": "cold",
        "created_at": "2024-11-18T19:05:00Z",
        "updated_at": "2024-12-05T12:00:00Z",
    },
    {
        "id": "p-brown",
        "email": "m.brown@browndesign.com",
        "first_name": "Michael",
        "last_name": "Brown",
        "phone": "020 7456 7890",
        "account_number": "HOC-1005",
        "account_type": "trade",
        "lead_source": "walk_in",
        "interest_level": "warm",
        "created_at": "2024-09-01T10:00:00Z",
        "updated_at": "2024-11-30T09:30:00Z",
    },
    {
        "id": "p-anderson",
        "email": "lisa@andersonarch.com",
        "first_name": None,
        "last_name": None,
        "phone": "07800 123456",
        "account_number": None,
        "account_type": "trade",
        "lead_source": None,
        "interest_level": None,
        "created_at": "2024-12-19T15:00:00Z",
        "updated_at": "2024-12-21T15:00:00Z",
    },
    # Marketing leads: profiles without a submission.
    {
        "id": "p-clark",
        "email": "jen.clark@clarkinteriors.com",
        "first_name": "Jennifer",
        "last_name": "Clark",
        "phone": "07900 234567",
        "account_number": "HOC-1007",
        "account_type": "trade",
        "lead_source": "referral",
        "interest_level": "hot",
        "created_at": "2024-12-02T10:00:00Z",
        "updated_at": "2024-12-03T10:00:00Z",
    },
    {
        "id": "p-taylor",
        "email": "r.taylor@email.co.uk",
        "first_name": "Robert",
        "last_name": "Taylor",
        "phone": "020 8567 8901",
        "account_number": "HOC-1008",
        "account_type": "private",
        "lead_source": "website",
        "interest_level": None,
        "created_at": "2024-10-28T13:00:00Z",
        "updated_at": "2024-11-01T13:00:00Z",
    },
    {
        "id": "p-evans",
        "email": "olivia.evans@outlook.com",
        "first_name": "Olivia",
        "last_name": "Evans",
        "phone": None,
        "account_number": "HOC-1009",
        "account_type": "private",
        "lead_source": "instagram",
        "interest_level": "cold",
        "created_at": "2024-12-10T17:40:00Z",
        "updated_at": "2024-12-15T17:40:00Z",
    },
]

_SUBMISSIONS: List[Dict[str, Any]] = [
    {
        "id": "sub-anderson",
        "user_id": "p-anderson",
        "items": [
            {"id": "i-601", "slug": "brass-tap-set", "name": "Brass Tap Set", "price": 450, "quantity": 2,
             "category": "bathroom"},
        ],
        "total_items": 2,
        "filename": "anderson-selection.pdf",
        "status": "pending",
        "created_at": "2024-12-21T15:00:00Z",
    },
    {
        "id": "sub-mitchell",
        "user_id": "p-mitchell",
        "items": [
            {"id": "i-201", "slug": "kensington-dining-set", "name": "Kensington Dining Set", "price": 16100,
             "quantity": 1, "category": "dining", "colour": "Oak"},
        ],
        "total_items": 1,
        "filename": "mitchell-selection.pdf",
        "status": "reviewed",
        "created_at": "2024-12-18T08:45:00Z",
    },
    {
        "id": "sub-ghost",
        "user_id": "p-deleted",
        "items": [{"id": "i-999", "slug": "side-table", "name": "Side Table", "price": 700, "quantity": 1}],
        "total_items": 1,
        "filename": None,
        "status": "pending",
        "created_at": "2024-12-17T12:00:00Z",
    },
    {
        "id": "sub-richardson",
        "user_id": "p-richardson",
        "items": [
            {"id": "i-101", "slug": "clarence-sofa", "name": "Clarence Sofa", "price": 8500, "quantity": 1,
             "category": "living", "colour": "Velvet Navy"},
            {"id": "i-102", "slug": "monarch-armchair", "name": "Monarch Armchair", "price": 3200, "quantity": 2,
             "category": "living", "colour": "Leather Tan"},
        ],
        "total_items": 3,
        "filename": "richardson-selection.pdf",
        "status": "quoted",
        "created_at": "2024-12-15T10:00:00Z",
    },
    {
        "id": "sub-wilson",
        "user_id": "p-wilson",
        "items": [
            {"id": "i-401", "slug": "hampton-bookcase", "name": "Hampton Bookcase", "price": 4200, "quantity": 2,
             "category": "study"},
            {"id": "i-402", "slug": "reading-lamp", "name": "Reading Lamp", "price": None, "quantity": None,
             "category": "lighting"},
        ],
        "total_items": 3,
        "filename": None,
        "status": "reviewed",
        "created_at": "2024-12-05T12:00:00Z",
    },
    {
        "id": "sub-thompson",
        "user_id": "p-thompson",
        "items": [
            {"id": "i-301", "slug": "master-bed-frame", "name": "Master Bed Frame", "price": 12000, "quantity": 1,
             "category": "bedroom", "colour": "Oak"},
            {"id": "i-302", "slug": "bedside-table", "name": "Bedside Table", "price": 1800, "quantity": 2,
             "category": "bedroom", "colour": "Oak"},
        ],
        "total_items": 3,
        "filename": "thompson-selection.pdf",
        "status": "confirmed",
        "created_at": "2024-12-01T16:20:00Z",
    },
    {
        "id": "sub-brown",
        "user_id": "p-brown",
        "items": [
            {"id": "i-501", "slug": "office-desk", "name": "Office Desk", "price": 5500, "quantity": 1,
             "category": "study", "colour": "Mahogany"},
        ],
        "total_items": 1,
        "filename": "brown-selection.pdf",
        "status": "confirmed",
        "created_at": "2024-11-20T09:30:00Z",
    },
]

_PIPELINE: List[Dict[str, Any]] = [
    {
        "id": "pl-richardson",
        "client_id": "p-richardson",
        "stage": "quoted",
        "priority": "high",
        "estimated_value": 14900,
        "meeting_date": "2024-12-12T14:00:00Z",
        "last_contacted_at": "2024-12-16T09:00:00Z",
        "quote_id": "q-1",
        "order_id": None,
        "assigned_to": "admin-2",
        "source": "website_signup",
        "notes": "Prefers navy velvet.",
        "created_at": "2024-12-15T10:05:00Z",
        "updated_at": "2024-12-16T09:00:00Z",
    },
    {
        "id": "pl-thompson",
        "client_id": "p-thompson",
        "stage": "in_production",
        "priority": "urgent",
        "estimated_value": 15600,
        "meeting_date": None,
        "last_contacted_at": "2024-12-20T11:00:00Z",
        "quote_id": "q-3",
        "order_id": "o-3",
        "assigned_to": "admin-1",
        "source": "phone",
        "notes": None,
        "created_at": "2024-12-01T16:30:00Z",
        "updated_at": "2024-12-20T11:00:00Z",
    },
    {
        "id": "pl-wilson",
        "client_id": "p-wilson",
        "stage": "lost",
        "priority": None,
        "estimated_value": None,
        "meeting_date": None,
        "last_contacted_at": "2024-12-10T10:00:00Z",
        "quote_id": None,
        "order_id": None,
        "assigned_to": None,
        "source": "social",
        "notes": None,
        "created_at": "2024-12-05T12:10:00Z",
        "updated_at": "2024-12-10T10:00:00Z",
    },
    {
        "id": "pl-brown",
        "client_id": "p-brown",
        "stage": "completed",
        "priority": "normal",
        "estimated_value": 5500,
        "meeting_date": None,
        "last_contacted_at": "2024-12-14T15:00:00Z",
        "quote_id": None,
        "order_id": "o-5",
        "assigned_to": "admin-1",
        "source": "walk_in",
        "notes": None,
        "created_at": "2024-11-20T09:40:00Z",
        "updated_at": "2024-12-14T15:00:00Z",
    },
    {
        "id": "pl-anderson",
        "client_id": "p-anderson",
        "stage": "negotiating",
        "priority": "low",
        "estimated_value": None,
        "meeting_date": None,
        "last_contacted_at": None,
        "quote_id": None,
        "order_id": None,
        "assigned_to": "admin-9",
        "source": None,
        "notes": None,
        "created_at": "2024-12-21T15:05:00Z",
        "updated_at": "2024-12-21T15:05:00Z",
    },
]

_PAYMENTS: List[Dict[str, Any]] = [
    {"client_id": "p-richardson", "pipeline_id": "pl-richardson", "payment_type": "deposit", "amount": 2880,
     "status": "paid", "paid_at": "2024-12-17T10:00:00Z", "reference": "BACS-2880"},
    {"client_id": "p-richardson", "pipeline_id": "pl-richardson", "payment_type": "production", "amount": 10080,
     "status": "pending", "paid_at": None, "reference": None},
    {"client_id": "p-thompson", "pipeline_id": "pl-thompson", "payment_type": "deposit", "amount": 3120,
     "status": "paid", "paid_at": "2024-12-03T10:00:00Z", "reference": None},
    {"client_id": "p-thompson", "pipeline_id": "pl-thompson", "payment_type": "production", "amount": 10920,
     "status": "paid", "paid_at": "2024-12-10T10:00:00Z", "reference": None},
    {"client_id": "p-brown", "pipeline_id": "pl-brown", "payment_type": "deposit", "amount": 1100,
     "status": "paid", "paid_at": "2024-11-22T10:00:00Z", "reference": None},
    {"client_id": "p-brown", "pipeline_id": "pl-brown", "payment_type": "production", "amount": 3850,
     "status": "paid", "paid_at": "2024-11-29T10:00:00Z", "reference": None},
    {"client_id": "p-brown", "pipeline_id": "pl-brown", "payment_type": "delivery", "amount": 550,
     "status": "paid", "paid_at": "2024-12-14T10:00:00Z", "reference": None},
]

_SELECTIONS: List[Dict[str, Any]] = [
    {
        "user_id": "p-clark",
        "items": [
            {"id": "i-701", "slug": "clarence-sofa", "name": "Clarence Sofa", "price": 8500, "quantity": 1,
             "colour": "Velvet Emerald"},
            {"id": "i-702", "slug": "accent-pillows", "name": "Accent Pillows Set", "price": 450, "quantity": 4},
        ],
        "updated_at": "2024-12-20T18:00:00Z",
    },
    {"user_id": "p-evans", "items": [], "updated_at": "2024-12-15T17:40:00Z"},
    {
        "user_id": "p-richardson",
        "items": [{"id": "i-103", "slug": "windsor-coffee-table", "name": "Windsor Coffee Table", "price": 2100,
                   "quantity": 1}],
        "updated_at": "2024-12-19T10:00:00Z",
    },
]

_NEWSLETTER: List[Dict[str, Any]] = [
    {"id": "nl-greenhome", "email": "hello@greenhome.co.uk", "source": "website_newsletter",
     "subscribed_at": "2024-12-01T07:30:00Z", "is_active": True, "converted_to_account": False,
     "profile_id": None},
    {"id": "nl-converted", "email": "r.taylor@email.co.uk", "source": "coming_soon",
     "subscribed_at": "2024-10-01T07:30:00Z", "is_active": True, "converted_to_account": True,
     "profile_id": "p-taylor"},
    {"id": "nl-unsubscribed", "email": "former@subscriber.com", "source": "website_newsletter",
     "subscribed_at": "2024-09-01T07:30:00Z", "is_active": False, "converted_to_account": False,
     "profile_id": None},
]

_OUTREACH: List[Dict[str, Any]] = [
    {"client_id": "p-taylor", "outreach_type": "call", "outcome": "voicemail", "notes": "Left a message.",
     "follow_up_date": "2024-12-27", "created_at": "2024-12-10T11:00:00Z"},
    {"client_id": "p-clark", "outreach_type": "email", "outcome": "email_sent", "notes": None,
     "follow_up_date": None, "created_at": "2024-12-04T09:00:00Z"},
    {"client_id": "p-taylor", "outreach_type": "email", "outcome": "email_sent", "notes": "Welcome email.",
     "follow_up_date": "2024-12-05", "created_at": "2024-11-20T09:00:00Z"},
]

_ADMIN_USERS: List[Dict[str, Any]] = [
    {"id": "admin-1", "user_id": "u-mateo", "email": "mateo@houseofclarence.uk", "name": "Mateo Dervishi",
     "role": "admin", "avatar_url": None, "is_active": True, "created_at": "2024-01-15T09:00:00Z"},
    {"id": "admin-2", "user_id": "u-sarah", "email": "sarah@houseofclarence.uk", "name": "Sarah Johnson",
     "role": "sales", "avatar_url": None, "is_active": True, "created_at": "2024-05-10T09:00:00Z"},
    {"id": "admin-3", "user_id": "u-tom", "email": "tom@houseofclarence.uk", "name": "Tom Wilson",
     "role": "operations", "avatar_url": None, "is_active": True, "created_at": "2024-03-20T09:00:00Z"},
    {"id": "admin-4", "user_id": "u-mike", "email": "mike@houseofclarence.uk", "name": "Mike Johnson",
     "role": "operations", "avatar_url": None, "is_active": True, "created_at": "2024-06-01T09:00:00Z"},
    {"id": "admin-5", "user_id": None, "email": "emily@houseofclarence.uk", "name": "Emily Davis",
     "role": "manager", "avatar_url": None, "is_active": False, "created_at": "2024-08-12T09:00:00Z"},
]

_QUOTES: List[Dict[str, Any]] = [
    {
        "id": "q-1", "quote_number": "Q-2024-001", "client_name": "James Richardson",
        "client_email": "james@richardson.com", "status": "sent",
        "items": [
            {"name": "Clarence Sofa", "description": "Velvet Navy - 3 Seater", "quantity": 1, "unit_price": 8500},
            {"name": "Monarch Armchair", "description": "Leather Tan", "quantity": 2, "unit_price": 3200},
        ],
        "discount": 500, "total_amount": 14400, "valid_until": "2025-01-15",
        "created_at": "2024-12-15T12:00:00Z", "sent_at": "2024-12-16T09:00:00Z",
        "viewed_at": None, "responded_at": None, "loss_reason": None, "notes": None,
    },
    {
        "id": "q-2", "quote_number": "Q-2024-002", "client_name": "Sarah Mitchell",
        "client_email": "sarah@mitchellhome.co.uk", "status": "viewed",
        "items": [
            {"name": "Kensington Dining Set", "description": "8 Person - Oak", "quantity": 1, "unit_price": 16100},
        ],
        "discount": 0, "total_amount": 16100, "valid_until": "2025-01-20",
        "created_at": "2024-12-18T10:00:00Z", "sent_at": "2024-12-18T11:00:00Z",
        "viewed_at": "2024-12-19T08:00:00Z", "responded_at": None, "loss_reason": None, "notes": None,
    },
    {
        "id": "q-3", "quote_number": "Q-2024-003", "client_name": "David Thompson",
        "client_email": "david.t@email.com", "status": "accepted",
        "items": [
            {"name": "Master Bed Frame", "description": "King Size - Oak", "quantity": 1, "unit_price": 12000},
            {"name": "Bedside Table", "description": "Oak with Drawers", "quantity": 2, "unit_price": 1800},
        ],
        "discount": 0, "total_amount": 15600, "valid_until": "2025-01-01",
        "created_at": "2024-12-01T17:00:00Z", "sent_at": "2024-12-02T09:00:00Z",
        "viewed_at": "2024-12-02T12:00:00Z", "responded_at": "2024-12-03T09:00:00Z",
        "loss_reason": None, "notes": None,
    },
    {
        "id": "q-4", "quote_number": "Q-2024-004", "client_name": "Emma Wilson",
        "client_email": "emma.wilson@gmail.com", "status": "draft",
        "items": [
            {"name": "Hampton Bookcase", "description": "Large - Walnut", "quantity": 2, "unit_price": 4200},
            {"name": "Reading Lamp", "description": "Brass Finish", "quantity": 2, "unit_price": 350},
        ],
        "discount": 300, "total_amount": 8800, "valid_until": "2025-01-25",
        "created_at": "2024-12-20T10:00:00Z", "sent_at": None,
        "viewed_at": None, "responded_at": None, "loss_reason": None, "notes": None,
    },
    {
        "id": "q-5", "quote_number": "Q-2024-005", "client_name": "Michael Brown",
        "client_email": "m.brown@browndesign.com", "status": "rejected",
        "items": [
            {"name": "Office Desk", "description": "Executive - Mahogany", "quantity": 1, "unit_price": 5500},
        ],
        "discount": 0, "total_amount": 5500, "valid_until": "2024-12-15",
        "created_at": "2024-11-30T10:00:00Z", "sent_at": "2024-12-01T09:00:00Z",
        "viewed_at": None, "responded_at": "2024-12-05T09:00:00Z",
        "loss_reason": "chose_competitor", "notes": "Client decided to go with competitor",
    },
    {
        "id": "q-6", "quote_number": "Q-2024-006", "client_name": "Lisa Anderson",
        "client_email": "lisa@andersonarch.com", "status": "accepted",
        "items": [
            {"name": "Stone Sanctuary Bath", "description": "Freestanding", "quantity": 1, "unit_price": 18000},
            {"name": "Brass Fittings", "description": "Full set", "quantity": 3, "unit_price": 1000},
        ],
        "discount": 0, "total_amount": 21000, "valid_until": "2025-01-10",
        "created_at": "2024-12-10T10:00:00Z", "sent_at": "2024-12-10T12:00:00Z",
        "viewed_at": "2024-12-11T08:00:00Z", "responded_at": "2024-12-12T15:00:00Z",
        "loss_reason": None, "notes": None,
    },
    {
        "id": "q-7", "quote_number": "Q-2024-007", "client_name": "Robert Taylor",
        "client_email": "r.taylor@email.co.uk", "status": "rejected",
        "items": [
            {"name": "Windsor Coffee Table", "description": "Walnut", "quantity": 1, "unit_price": 2100},
        ],
        "discount": 0, "total_amount": 2100, "valid_until": "2024-12-30",
        "created_at": "2024-11-25T10:00:00Z", "sent_at": "2024-11-25T12:00:00Z",
        "viewed_at": None, "responded_at": "2024-12-01T09:00:00Z",
        "loss_reason": None, "notes": None,
    },
    {
        "id": "q-8", "quote_number": "Q-2024-008", "client_name": "Jennifer Clark",
        "client_email": "jen.clark@clarkinteriors.com", "status": "sent",
        "items": [
            {"name": "Clarence Sofa", "description": "Velvet Emerald", "quantity": 1, "unit_price": 8500},
        ],
        "discount": 0, "total_amount": 8500, "valid_until": "2024-12-01",
        "created_at": "2024-11-01T10:00:00Z", "sent_at": "2024-11-01T12:00:00Z",
        "viewed_at": None, "responded_at": None, "loss_reason": None, "notes": None,
    },
]

_ORDERS: List[Dict[str, Any]] = [
    {
        "id": "o-1", "order_number": "HOC-2024-001", "client_name": "James Richardson",
        "client_email": "james@richardson.com", "status": "processing",
        "items": [
            {"name": "Clarence Sofa - Velvet Navy", "quantity": 1, "price": 8500},
            {"name": "Monarch Armchair - Leather Tan", "quantity": 2, "price": 3200},
            {"name": "Windsor Coffee Table", "quantity": 1, "price": 2100},
        ],
        "total_amount": 17000, "deposit_paid": 5100, "assigned_to": "Mateo",
        "created_at": "2024-12-15T12:00:00Z", "expected_delivery": "2025-02-10", "notes": None,
    },
    {
        "id": "o-2", "order_number": "HOC-2024-002", "client_name": "Sarah Mitchell",
        "client_email": "sarah@mitchellhome.co.uk", "status": "confirmed",
        "items": [
            {"name": "Kensington Dining Table", "quantity": 1, "price": 6500},
            {"name": "Kensington Dining Chair", "quantity": 8, "price": 1200},
        ],
        "total_amount": 16100, "deposit_paid": 4830, "assigned_to": "Mateo",
        "created_at": "2024-12-18T12:00:00Z", "expected_delivery": "2025-02-20", "notes": None,
    },
    {
        "id": "o-3", "order_number": "HOC-2024-003", "client_name": "David Thompson",
        "client_email": "david.t@email.com", "status": "received",
        "items": [
            {"name": "Master Bed Frame - Oak", "quantity": 1, "price": 12000},
            {"name": "Bedside Tables", "quantity": 2, "price": 1800},
        ],
        "total_amount": 15600, "deposit_paid": 15600, "assigned_to": "Tom",
        "created_at": "2024-12-01T18:00:00Z", "expected_delivery": "2025-01-15", "notes": None,
    },
    {
        "id": "o-4", "order_number": "HOC-2024-004", "client_name": "Emma Wilson",
        "client_email": "emma.wilson@gmail.com", "status": "ready_for_delivery",
        "items": [{"name": "Hampton Bookcase", "quantity": 2, "price": 4200}],
        "total_amount": 8400, "deposit_paid": 8400, "assigned_to": "Tom",
        "created_at": "2024-11-25T12:00:00Z", "expected_delivery": "2024-12-28", "notes": None,
    },
    {
        "id": "o-5", "order_number": "HOC-2024-005", "client_name": "Michael Brown",
        "client_email": "m.brown@browndesign.com", "status": "delivered",
        "items": [
            {"name": "Clarence Sofa - Velvet Emerald", "quantity": 2, "price": 8500},
            {"name": "Accent Pillows Set", "quantity": 4, "price": 450},
        ],
        "total_amount": 18800, "deposit_paid": 18800, "assigned_to": "Mike",
        "created_at": "2024-11-10T12:00:00Z", "expected_delivery": "2024-12-14", "notes": None,
    },
]

_DELIVERIES: List[Dict[str, Any]] = [
    {"id": "d-1", "delivery_number": "DEL-001", "order_number": "HOC-2024-001", "client_name": "James Richardson",
     "address": "42 Kensington Gardens, London W8 4PX", "contact_phone": "020 7123 4567",
     "scheduled_date": "2024-12-23", "time_window": "9:00 AM - 12:00 PM", "status": "scheduled",
     "item_count": 4, "driver": "Tom", "notes": "Ring doorbell twice. Building has service entrance."},
    {"id": "d-2", "delivery_number": "DEL-002", "order_number": "HOC-2024-002", "client_name": "Sarah Mitchell",
     "address": "15 Chelsea Manor, London SW3 5RZ", "contact_phone": "020 8234 5678",
     "scheduled_date": "2024-12-23", "time_window": "2:00 PM - 5:00 PM", "status": "in_transit",
     "item_count": 9, "driver": "Mike", "notes": None},
    {"id": "d-3", "delivery_number": "DEL-003", "order_number": "HOC-2024-003", "client_name": "David Thompson",
     "address": "78 Mayfair Place, London W1K 6JP", "contact_phone": "07700 900123",
     "scheduled_date": "2024-12-24", "time_window": "10:00 AM - 1:00 PM", "status": "scheduled",
     "item_count": 3, "driver": None, "notes": "Large items - requires two person lift"},
    {"id": "d-4", "delivery_number": "DEL-004", "order_number": "HOC-2024-004", "client_name": "Emma Wilson",
     "address": "23 Notting Hill Gate, London W11 3JQ", "contact_phone": "07700 900456",
     "scheduled_date": "2024-12-20", "time_window": "9:00 AM - 12:00 PM", "status": "delivered",
     "item_count": 2, "driver": "Tom", "notes": None},
    {"id": "d-5", "delivery_number": "DEL-005", "order_number": "HOC-2024-005", "client_name": "Michael Brown",
     "address": "56 Belgravia Square, London SW1X 8PH", "contact_phone": "020 7456 7890",
     "scheduled_date": "2024-12-19", "time_window": "1:00 PM - 4:00 PM", "status": "failed",
     "item_count": 6, "driver": "Mike", "notes": "No one home."},
]

_TASKS: List[Dict[str, Any]] = [
    {"id": "t-1", "title": "Follow up with James Richardson about bathroom tiles",
     "description": "Client requested additional marble samples.", "status": "pending", "priority": "high",
     "due_date": "2024-12-23", "assigned_to": "Sarah",
     "related_type": "client", "related_id": "pl-richardson", "related_name": "James Richardson"},
    {"id": "t-2", "title": "Prepare quote for Chelsea Manor project",
     "description": "Full bathroom renovation including Stone Sanctuary bath.", "status": "in_progress",
     "priority": "urgent", "due_date": "2024-12-22", "assigned_to": "Mateo",
     "related_type": "quote", "related_id": "q-2", "related_name": "Sarah Mitchell"},
    {"id": "t-3", "title": "Confirm delivery schedule with Thompson order",
     "description": "Coordinate with warehouse on bed frame availability.", "status": "completed",
     "priority": "normal", "due_date": "2024-12-21", "assigned_to": "Tom",
     "related_type": "order", "related_id": "o-3", "related_name": "David Thompson"},
    {"id": "t-4", "title": "Send welcome email to new signups",
     "description": "New accounts created this week without submissions.", "status": "pending",
     "priority": "normal", "due_date": "2024-12-24", "assigned_to": "Sarah",
     "related_type": None, "related_id": None, "related_name": None},
    {"id": "t-5", "title": "Review Anderson quote before sending",
     "description": None, "status": "pending", "priority": "high",
     "due_date": "2024-12-23", "assigned_to": "Mateo",
     "related_type": "quote", "related_id": "q-6", "related_name": "Lisa Anderson"},
    {"id": "t-6", "title": "Update inventory spreadsheet",
     "description": "Add new brass fixture range to product catalog.", "status": "pending",
     "priority": "low", "due_date": "2024-12-27", "assigned_to": "Tom",
     "related_type": None, "related_id": None, "related_name": None},
    {"id": "t-7", "title": "Schedule consultation with Jennifer Clark",
     "description": "Client prefers afternoon slots.", "status": "in_progress",
     "priority": "normal", "due_date": "2024-12-26", "assigned_to": "Mateo",
     "related_type": "client", "related_id": "p-clark", "related_name": "Jennifer Clark"},
]

_NOTIFICATIONS: List[Dict[str, Any]] = [
    {"id": "n-1", "user_id": "admin-1", "type": "lead", "title": "New Lead",
     "message": "Lisa Anderson submitted a selection request", "link": "/dashboard/clients",
     "read": False, "read_at": None, "created_at": "2024-12-21T15:01:00Z"},
    {"id": "n-2", "user_id": "admin-1", "type": "quote", "title": "Quote Viewed",
     "message": "Sarah Mitchell viewed quote Q-2024-002", "link": "/dashboard/quotes",
     "read": False, "read_at": None, "created_at": "2024-12-19T08:01:00Z"},
    {"id": "n-3", "user_id": "admin-1", "type": "reminder", "title": "Follow-up Reminder",
     "message": "Follow up with David Thompson about production timeline", "link": "/dashboard/clients",
     "read": False, "read_at": None, "created_at": "2024-12-18T09:00:00Z"},
    {"id": "n-4", "user_id": "admin-1", "type": "delivery", "title": "Delivery Completed",
     "message": "Order HOC-2024-004 successfully delivered to Emma Wilson", "link": "/dashboard/deliveries",
     "read": True, "read_at": "2024-12-20T17:00:00Z", "created_at": "2024-12-20T16:00:00Z"},
    {"id": "n-5", "user_id": "admin-1", "type": "order", "title": "Order Status Updated",
     "message": "Order HOC-2024-003 marked as received", "link": "/dashboard/orders",
     "read": True, "read_at": "2024-12-17T12:00:00Z", "created_at": "2024-12-17T10:00:00Z"},
    {"id": "n-6", "user_id": "admin-2", "type": "system", "title": "Weekly Report Ready",
     "message": "Your weekly sales report is ready to view", "link": None,
     "read": False, "read_at": None, "created_at": "2024-12-16T07:00:00Z"},
    {"id": "n-7", "user_id": "admin-1", "type": "expiry", "title": "Quote Expiring",
     "message": "Quote Q-2024-001 expires soon", "link": "/dashboard/quotes",
     "read": True, "read_at": "2024-12-15T12:00:00Z", "created_at": "2024-12-15T07:00:00Z"},
    {"id": "n-8", "user_id": "admin-1", "type": "delivery", "title": "Delivery Failed",
     "message": "Delivery for order HOC-2024-005 failed - no one home", "link": "/dashboard/deliveries",
     "read": True, "read_at": "2024-12-19T18:00:00Z", "created_at": "2024-12-19T17:00:00Z"},
]


def development_dataset() -> Dict[str, List[Dict[str, Any]]]:
    """A fresh deep copy of every fixture table, keyed by Supabase table name."""

    return copy.deepcopy(
        {
            "profiles": _PROFILES,
            "selection_submissions": _SUBMISSIONS,
            "client_pipeline": _PIPELINE,
            "client_payments": _PAYMENTS,
            "client_selections": _SELECTIONS,
            "newsletter_subscribers": _NEWSLETTER,
            "lead_outreach": _OUTREACH,
            "admin_users": _ADMIN_USERS,
            "quotes": _QUOTES,
            "orders": _ORDERS,
            "deliveries": _DELIVERIES,
            "tasks": _TASKS,
            "team_notifications": _NOTIFICATIONS,
        }
    )


__all__ = ["development_dataset"]
