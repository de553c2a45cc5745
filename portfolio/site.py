"""Статические тексты публичных страниц и панели администратора"""

SITE_TITLE = "AI Engineer Portfolio - Data Science & Machine Learning Expert"
SITE_DESCRIPTION = (
    "Professional portfolio of an AI Engineer and Data Scientist specializing in "
    "machine learning, AI integration, and intelligent solutions."
)

NAV_LINKS = [
    ("Home", "/"),
    ("Projects", "/projects"),
    ("Notes", "/notes"),
    ("Videos", "/videos"),
    ("Contact", "/contact"),
]

SKILLS = [
    {"name": "Python", "level": 95},
    {"name": "Machine Learning", "level": 90},
    {"name": "TensorFlow/PyTorch", "level": 85},
    {"name": "Data Analysis", "level": 92},
    {"name": "SQL", "level": 88},
    {"name": "Cloud Platforms", "level": 80},
]

SERVICES = [
    {
        "title": "AI Integration",
        "description": "Seamlessly integrate AI solutions into your existing systems and workflows.",
        "features": ["Custom AI Models", "API Development", "System Integration"],
    },
    {
        "title": "Data Science",
        "description": "Transform raw data into actionable insights and predictive models.",
        "features": ["Data Analysis", "Predictive Modeling", "Visualization"],
    },
    {
        "title": "ML Engineering",
        "description": "Build scalable machine learning pipelines and production-ready systems.",
        "features": ["MLOps", "Model Deployment", "Performance Optimization"],
    },
]

CONTACT_METHODS = [
    {
        "title": "Email",
        "value": "hello@aiportfolio.com",
        "href": "mailto:hello@aiportfolio.com",
        "description": "Best for detailed project discussions",
    },
    {
        "title": "WhatsApp",
        "value": "+62 812-3456-7890",
        "href": "https://wa.me/6281234567890",
        "description": "Quick questions and consultations",
    },
    {
        "title": "Telegram",
        "value": "@aiportfolio",
        "href": "https://t.me/aiportfolio",
        "description": "Instant messaging and updates",
    },
    {
        "title": "GitHub",
        "value": "github.com/aiportfolio",
        "href": "https://github.com/aiportfolio",
        "description": "Check out my code and projects",
    },
]

WORKING_HOURS = [
    {"day": "Monday - Friday", "hours": "9:00 AM - 6:00 PM"},
    {"day": "Saturday", "hours": "10:00 AM - 4:00 PM"},
    {"day": "Sunday", "hours": "Emergency only"},
]

# ссылки на публичные страницы
QUICK_ACTIONS = [
    {"title": "View Projects", "description": "See how your work is showcased", "href": "/projects"},
    {"title": "Browse Notes", "description": "Review published knowledge", "href": "/notes"},
    {"title": "Watch Videos", "description": "Check motivational content", "href": "/videos"},
    {"title": "Contact Page", "description": "Test the inquiry form", "href": "/contact"},
]
