"""
Static in-memory inbox used by the demo client.

There is no mailbox integration: this fixture is the whole inbox. Emails are
validated into ``Email`` models once, at import time.
"""

from carbon_mail.models.input_models import Email

_RAW_EMAILS: list[dict] = [
    {
        "id": "e01",
        "from": {"name": "MegaDeals", "email": "promo@megadeals.example"},
        "subject": "48 HOURS ONLY: 70% off everything!",
        "body": "Don't miss our biggest sale of the year. Shop now and save big on electronics, fashion and more.",
        "labels": ["Promotions"],
        "date": "2026-09-02T08:15:00Z",
        "read": False,
        "has_attachment": False,
        "sizeKB": 86,
    },
    {
        "id": "e02",
        "from": {"name": "Maria Lopez", "email": "maria.lopez@example.com"},
        "subject": "Dinner on Saturday?",
        "body": "Hi! Are you free on Saturday evening? We were thinking of trying the new place downtown.",
        "labels": ["Primary"],
        "date": "2026-09-03T18:40:00Z",
        "read": True,
        "has_attachment": False,
        "sizeKB": 12,
    },
    {
        "id": "e03",
        "from": {"name": "First National Bank", "email": "statements@fnb.example"},
        "subject": "Your September statement is ready",
        "body": "Your monthly account statement is now available. Please find the PDF attached.",
        "labels": ["Primary"],
        "date": "2026-09-05T06:00:00Z",
        "read": False,
        "has_attachment": True,
        "sizeKB": 310,
    },
    {
        "id": "e04",
        "from": {"name": "Prize Center", "email": "winner@prize-center.example"},
        "subject": "Congratulations, you have been selected!",
        "body": "Claim your free cruise now by confirming your credit card details within 24 hours.",
        "labels": ["Spam"],
        "date": "2026-09-05T23:11:00Z",
        "read": False,
        "has_attachment": False,
        "sizeKB": 24,
    },
    {
        "id": "e05",
        "from": {"name": "Tech Weekly", "email": "newsletter@techweekly.example"},
        "subject": "This week in tech: chips, clouds and climate",
        "body": "Our weekly roundup of the most important technology stories. Unsubscribe at any time.",
        "labels": ["Promotions"],
        "date": "2026-09-06T07:00:00Z",
        "read": False,
        "has_attachment": False,
        "sizeKB": 142,
    },
    {
        "id": "e06",
        "from": {"name": "Prof. Adams", "email": "adams@university.example"},
        "subject": "Assignment 3 feedback",
        "body": "Please find your graded assignment attached. Let me know if you have questions before the exam.",
        "labels": ["Primary"],
        "date": "2026-09-08T13:25:00Z",
        "read": True,
        "has_attachment": True,
        "sizeKB": 520,
    },
    {
        "id": "e07",
        "from": {"name": "ShopRight", "email": "noreply@shopright.example"},
        "subject": "Items in your cart are waiting",
        "body": "You left something behind! Complete your order today and get free shipping.",
        "labels": ["Promotions"],
        "date": "2026-09-09T10:02:00Z",
        "read": False,
        "has_attachment": False,
        "sizeKB": 64,
    },
    {
        "id": "e08",
        "from": {"name": "Cloud Account Security", "email": "security@cloud.example"},
        "subject": "New sign-in to your account",
        "body": "We noticed a new sign-in from Chrome on Windows. If this was you, no action is needed.",
        "labels": ["Primary"],
        "date": "2026-09-10T21:47:00Z",
        "read": True,
        "has_attachment": False,
        "sizeKB": 18,
    },
    {
        "id": "e09",
        "from": {"name": "Crypto Millionaire", "email": "profit@fastcoins.example"},
        "subject": "Turn $100 into $10,000 in one week",
        "body": "Secret trading system revealed. Limited spots available, act now!",
        "labels": ["Spam"],
        "date": "2026-09-11T03:30:00Z",
        "read": False,
        "has_attachment": False,
        "sizeKB": 31,
    },
    {
        "id": "e10",
        "from": {"name": "HR Team", "email": "hr@company.example"},
        "subject": "Updated employment contract",
        "body": "Please review and sign the attached updated contract by the end of the month.",
        "labels": ["Primary"],
        "date": "2026-09-12T09:00:00Z",
        "read": False,
        "has_attachment": True,
        "sizeKB": 740,
    },
    {
        "id": "e11",
        "from": {"name": "Streamly", "email": "hello@streamly.example"},
        "subject": "New releases you might like",
        "body": "Based on what you watched, here are this week's picks just for you.",
        "labels": ["Promotions"],
        "date": "2026-09-13T16:20:00Z",
        "read": True,
        "has_attachment": False,
        "sizeKB": 210,
    },
    {
        "id": "e12",
        "from": {"name": "City Library", "email": "notices@library.example"},
        "subject": "Reminder: book due in 3 days",
        "body": "The book 'Designing Data-Intensive Applications' is due on 2026-09-17.",
        "labels": ["Primary"],
        "date": "2026-09-14T08:05:00Z",
        "read": False,
        "has_attachment": False,
        "sizeKB": 9,
    },
    {
        "id": "e13",
        "from": {"name": "Pharmacy Online", "email": "deals@cheap-meds.example"},
        "subject": "Cheap meds without prescription",
        "body": "Best prices guaranteed. Discreet shipping worldwide.",
        "labels": ["Spam"],
        "date": "2026-09-15T01:12:00Z",
        "read": False,
        "has_attachment": False,
        "sizeKB": 27,
    },
    {
        "id": "e14",
        "from": {"name": "Airline Rewards", "email": "miles@airline.example"},
        "subject": "Your miles are about to expire",
        "body": "Use your miles before 2026-12-31 or they will expire. Book a trip or shop with partners.",
        "labels": ["Promotions"],
        "date": "2026-09-16T11:45:00Z",
        "read": False,
        "has_attachment": False,
        "sizeKB": 98,
    },
    {
        "id": "e15",
        "from": {"name": "Dad", "email": "dad@family.example"},
        "subject": "Photos from the weekend",
        "body": "Here are the photos from grandma's birthday. Call me when you get a chance.",
        "labels": ["Primary"],
        "date": "2026-09-17T19:03:00Z",
        "read": True,
        "has_attachment": True,
        "sizeKB": 4200,
    },
    {
        "id": "e16",
        "from": {"name": "Fitness Club", "email": "news@fitclub.example"},
        "subject": "September class schedule",
        "body": "Check out our new yoga and spin classes this month. Members get 10% off merchandise.",
        "labels": ["Promotions"],
        "date": "2026-09-18T07:30:00Z",
        "read": True,
        "has_attachment": False,
        "sizeKB": 175,
    },
    {
        "id": "e17",
        "from": {"name": "Utility Co.", "email": "billing@utility.example"},
        "subject": "Your electricity bill",
        "body": "Your bill of $84.20 is due on 2026-10-01. Pay online to avoid late fees.",
        "labels": ["Primary"],
        "date": "2026-09-19T12:00:00Z",
        "read": False,
        "has_attachment": True,
        "sizeKB": 156,
    },
    {
        "id": "e18",
        "from": {"name": "Unknown Sender", "email": "x9z2@random.example"},
        "subject": "Re: invoice",
        "body": "Please open the attached invoice immediately.",
        "labels": ["Spam"],
        "date": "2026-09-20T04:44:00Z",
        "read": False,
        "has_attachment": True,
        "sizeKB": 66,
    },
    {
        "id": "e19",
        "from": {"name": "Social Network", "email": "notify@social.example"},
        "subject": "You have 12 new notifications",
        "body": "See what your friends have been up to. People you may know are waiting.",
        "labels": ["Promotions"],
        "date": "2026-09-21T15:10:00Z",
        "read": False,
        "has_attachment": False,
        "sizeKB": 48,
    },
    {
        "id": "e20",
        "from": {"name": "Project Lead", "email": "lead@company.example"},
        "subject": "Sprint planning notes",
        "body": "Attached are the notes from today's planning session. Please update your tickets.",
        "labels": ["Primary"],
        "date": "2026-09-22T17:55:00Z",
        "read": True,
        "has_attachment": True,
        "sizeKB": 88,
    },
    {
        "id": "e21",
        "from": {"name": "Gadget Store", "email": "offers@gadgets.example"},
        "subject": "Flash sale on headphones",
        "body": "Premium headphones at half price. Today only.",
        "labels": ["Promotions"],
        "date": "2026-09-23T09:09:00Z",
        "read": False,
        "has_attachment": False,
        "sizeKB": 72,
    },
    {
        "id": "e22",
        "from": {"name": "Dentist Office", "email": "appointments@smiles.example"},
        "subject": "Appointment confirmation",
        "body": "Your check-up is confirmed for 2026-10-04 at 10:30.",
        "labels": ["Primary"],
        "date": "2026-09-24T14:00:00Z",
        "read": False,
        "has_attachment": False,
        "sizeKB": 11,
    },
]

SAMPLE_EMAILS: list[Email] = [Email.model_validate(raw) for raw in _RAW_EMAILS]
