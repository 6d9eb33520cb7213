"""
Sample data for a fresh installation.

``seed`` creates the default administrator (``admin`` / ``admin123``),
six projects, eight WRUAs, three blog posts, three funding
opportunities and the home-page ``stats`` setting.  Running it again is
safe: records that already exist (same username, slug or name) are
skipped, and only the ``stats`` setting is rewritten.
"""

import logging
from typing import Dict

from .core.db import Database
from .schemas.blog import BlogPostCreate
from .schemas.funding import FundingOpportunityCreate
from .schemas.project import ProjectCreate
from .schemas.user import UserCreate
from .schemas.wrua import WruaCreate
from .services.blog_service import BlogService
from .services.funding_service import FundingService
from .services.project_service import ProjectService
from .services.settings_service import DEFAULT_STATS, STATS_KEY, SettingsService
from .services.user_service import UserService
from .services.wrua_service import WruaService

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"

SAMPLE_PROJECTS = [
    {
        "title": "Mara River Riparian Restoration",
        "slug": "mara-river-riparian-restoration",
        "description": (
            "Comprehensive restoration of riparian zones along the Mara River, including native "
            "tree planting, erosion control, and community engagement in 25 villages."
        ),
        "location": "Mara Region",
        "category": "Riparian Restoration",
        "image_url": "https://images.unsplash.com/photo-1559827260-dc66d52bef19?w=800",
        "impact_metrics": {"trees_planted": "15,000", "hectares_restored": "3,500", "communities_served": "25"},
        "sdgs": [6, 13, 15],
        "timeline": "2022 - 2025",
    },
    {
        "title": "Community Water Harvesting Systems",
        "slug": "community-water-harvesting-systems",
        "description": (
            "Installation of rainwater harvesting systems in rural communities to improve water "
            "access and reduce dependency on seasonal rivers."
        ),
        "location": "Sondu Region",
        "category": "Water Conservation",
        "image_url": "https://images.unsplash.com/photo-1547036967-23d11aacaee0?w=800",
        "impact_metrics": {"systems_installed": "45", "people_served": "8,000", "water_saved_liters": "500,000"},
        "sdgs": [6, 11],
        "funding_needed": "$75,000",
        "timeline": "2023 - 2024",
    },
    {
        "title": "Youth Water Stewardship Training",
        "slug": "youth-water-stewardship-training",
        "description": (
            "Training program for youth leaders in sustainable water management practices, "
            "conservation techniques, and community mobilization."
        ),
        "location": "Nyando Region",
        "category": "Community Training",
        "image_url": "https://images.unsplash.com/photo-1593113598332-cd288d649433?w=800",
        "impact_metrics": {"youth_trained": "500", "schools_reached": "30", "trainers_certified": "15"},
        "sdgs": [4, 6],
        "timeline": "Ongoing",
    },
    {
        "title": "Wetland Conservation Initiative",
        "slug": "wetland-conservation-initiative",
        "description": (
            "Protection and restoration of critical wetland ecosystems that serve as natural water "
            "filtration and flood control systems."
        ),
        "location": "Awach Region",
        "category": "Water Conservation",
        "image_url": "https://images.unsplash.com/photo-1559827260-dc66d52bef19?w=800",
        "impact_metrics": {
            "wetland_area_hectares": "2,200",
            "species_protected": "45",
            "water_quality_improvement": "35%",
        },
        "sdgs": [14, 15],
        "timeline": "2021 - 2024",
    },
    {
        "title": "Integrated Water Resource Monitoring",
        "slug": "integrated-water-resource-monitoring",
        "description": (
            "Development of a comprehensive water quality and quantity monitoring network across the "
            "basin using modern sensors and community-based data collection."
        ),
        "location": "Lake Victoria Basin",
        "category": "Infrastructure",
        "image_url": "https://images.unsplash.com/photo-1547036967-23d11aacaee0?w=800",
        "impact_metrics": {"monitoring_stations": "20", "data_points_collected": "50,000", "wruas_involved": "30"},
        "sdgs": [6, 9],
        "funding_needed": "$120,000",
        "timeline": "2023 - 2026",
    },
    {
        "title": "Climate-Resilient Agriculture for Watershed Health",
        "slug": "climate-resilient-agriculture",
        "description": (
            "Supporting farmers in adopting climate-smart agricultural practices that reduce soil "
            "erosion and improve water retention in the watershed."
        ),
        "location": "Mara Region",
        "category": "Community Training",
        "image_url": "https://images.unsplash.com/photo-1559827260-dc66d52bef19?w=800",
        "impact_metrics": {"farmers_trained": "1,200", "hectares_converted": "4,500", "erosion_reduced": "40%"},
        "sdgs": [2, 13, 15],
        "timeline": "2022 - 2025",
    },
]


def _wrua(name, location, lat, lng, focus_areas, contact, email, phone, description, since):
    return {
        "name": name,
        "location": location,
        "lat": lat,
        "lng": lng,
        "focus_areas": focus_areas,
        "contact_person": contact,
        "email": email,
        "phone": phone,
        "description": description,
        "member_since": since,
    }


SAMPLE_WRUAS = [
    _wrua("Mara-Serengeti WRUA", "Mara Region", -1.45, 35.05,
          ["Riparian Restoration", "Wildlife Conservation"], "John Kamau",
          "mara.serengeti@wrua.org", "+254 720 123 456",
          "Leading water conservation efforts in the Mara-Serengeti ecosystem.", "2015"),
    _wrua("Sondu River WRUA", "Sondu Region", -0.35, 34.75,
          ["Water Harvesting", "Community Engagement"], "Mary Wanjiru",
          "sondu.river@wrua.org", "+254 721 234 567",
          "Focused on sustainable water management along the Sondu River basin.", "2016"),
    _wrua("Nyando Basin WRUA", "Nyando Region", -0.25, 34.90,
          ["Youth Training", "Wetland Protection"], "Peter Ochieng",
          "nyando.basin@wrua.org", "+254 722 345 678",
          "Empowering communities through water stewardship education.", "2017"),
    _wrua("Awach River WRUA", "Awach Region", -0.15, 34.60,
          ["Wetland Conservation", "Flood Management"], "Grace Adhiambo",
          "awach.river@wrua.org", "+254 723 456 789",
          "Protecting critical wetland ecosystems in the Awach watershed.", "2016"),
    _wrua("Kuja River WRUA", "Kuja Region", -1.10, 34.50,
          ["Water Quality", "Agricultural Practices"], "David Otieno",
          "kuja.river@wrua.org", "+254 724 567 890",
          "Improving water quality through sustainable farming practices.", "2018"),
    _wrua("Migori River WRUA", "Migori Region", -1.05, 34.45,
          ["Infrastructure Development", "Community Water Access"], "Sarah Akinyi",
          "migori.river@wrua.org", "+254 725 678 901",
          "Expanding water access infrastructure for rural communities.", "2017"),
    _wrua("Gucha-Migori WRUA", "Gucha-Migori Region", -0.85, 34.70,
          ["Riparian Protection", "Erosion Control"], "James Nyabuto",
          "gucha.migori@wrua.org", "+254 726 789 012",
          "Combating soil erosion through riparian zone protection.", "2019"),
    _wrua("Lake Victoria South WRUA", "South Lake Victoria", -0.55, 34.25,
          ["Lake Protection", "Fisheries Management"], "Rose Atieno",
          "lv.south@wrua.org", "+254 727 890 123",
          "Protecting Lake Victoria shoreline and supporting sustainable fisheries.", "2015"),
]

SAMPLE_BLOG_POSTS = [
    {
        "title": "MaraSondu Forum Celebrates Successful River Cleanup Campaign",
        "slug": "marasondu-forum-celebrates-successful-river-cleanup",
        "content": (
            "<p>In a remarkable display of community solidarity, over 500 volunteers joined the "
            "MaraSondu WRUAS Forum's annual river cleanup campaign last weekend. The event, which "
            "spanned across 15 kilometers of the Mara River, successfully removed over 3 tons of "
            "waste and debris.</p>\n"
            "<p>The cleanup effort was complemented by tree planting activities, with 2,000 native "
            "tree seedlings planted along the riverbanks. These trees will help stabilize the "
            "riverbanks, reduce erosion, and provide habitat for local wildlife.</p>"
        ),
        "excerpt": (
            "Over 500 volunteers joined the annual Mara River cleanup campaign, removing 3 tons of "
            "waste and planting 2,000 trees along the riverbanks."
        ),
        "author": "Communications Team",
        "category": "Conservation",
        "tags": ["River Cleanup", "Community Action", "Tree Planting"],
        "featured_image": "https://images.unsplash.com/photo-1559827260-dc66d52bef19?w=800",
    },
    {
        "title": "Youth Training Program Graduates 150 New Water Stewards",
        "slug": "youth-training-program-graduates-150-water-stewards",
        "content": (
            "<p>The MaraSondu WRUAS Forum proudly announces the graduation of 150 young people from "
            "its intensive Water Stewardship Training Program. The six-month program equipped "
            "participants with skills in water resource management, conservation techniques, and "
            "community mobilization.</p>\n"
            "<p>Graduates have committed to establishing water conservation clubs in their "
            "respective communities, with plans to reach over 5,000 additional young people in the "
            "coming year.</p>"
        ),
        "excerpt": (
            "150 young people graduate from intensive Water Stewardship Training Program, ready to "
            "lead conservation efforts in their communities."
        ),
        "author": "Training Department",
        "category": "Training",
        "tags": ["Youth Programs", "Capacity Building", "Water Education"],
        "featured_image": "https://images.unsplash.com/photo-1593113598332-cd288d649433?w=800",
    },
    {
        "title": "New Partnership with Water Resources Authority Strengthens Conservation Efforts",
        "slug": "new-partnership-wra-strengthens-conservation",
        "content": (
            "<p>The MaraSondu WRUAS Forum has formalized a strategic partnership with the Water "
            "Resources Authority (WRA) to enhance water conservation efforts across the Lake "
            "Victoria Basin. This collaboration will bring additional technical expertise and "
            "resources to support the forum's 30 member WRUAs.</p>\n"
            "<p>Joint monitoring stations will be established at key points along major rivers to "
            "provide real-time water quality and flow data.</p>"
        ),
        "excerpt": (
            "Strategic partnership with Water Resources Authority brings technical expertise and "
            "resources to support 30 member WRUAs in conservation efforts."
        ),
        "author": "Executive Team",
        "category": "Partnerships",
        "tags": ["WRA Partnership", "Collaboration", "Water Management"],
        "featured_image": "https://images.unsplash.com/photo-1547036967-23d11aacaee0?w=800",
    },
]

SAMPLE_FUNDING = [
    {
        "name": "Global Water Partnership Small Grants",
        "source": "Global Water Partnership",
        "amount": "$25,000 - $50,000",
        "deadline": "March 31, 2025",
        "focus_areas": ["Water Conservation", "Community Engagement"],
        "alignment_score": "High",
        "status": "open",
        "notes": "Perfect for community-based water projects with clear sustainability plans.",
    },
    {
        "name": "Climate Adaptation Fund",
        "source": "African Development Bank",
        "amount": "$100,000 - $500,000",
        "deadline": "June 15, 2025",
        "focus_areas": ["Climate Adaptation", "Infrastructure"],
        "alignment_score": "Medium",
        "status": "open",
        "notes": "Requires co-financing and government endorsement.",
    },
    {
        "name": "Ecosystem Restoration Grant",
        "source": "UN Environment Programme",
        "amount": "$75,000",
        "deadline": "April 30, 2025",
        "focus_areas": ["Wetland Conservation", "Riparian Restoration"],
        "alignment_score": "High",
        "status": "closing soon",
        "notes": "Focus on restoring degraded ecosystems in the Lake Victoria Basin.",
    },
]


def _exists(db: Database, table: str, column: str, value: str) -> bool:
    conn = db.connect()
    try:
        return conn.execute(f"SELECT 1 FROM {table} WHERE {column} = ?", (value,)).fetchone() is not None
    finally:
        conn.close()


async def seed(db: Database) -> Dict[str, int]:
    """Populate ``db`` with the sample content.

    The schema must already exist (``Database.init_db``).  Returns how
    many records of each kind were inserted by this run.
    """
    created = {"users": 0, "projects": 0, "wruas": 0, "blog_posts": 0, "funding": 0}

    users = UserService(db)
    if await users.get_by_username(DEFAULT_ADMIN_USERNAME) is None:
        await users.create_user(
            UserCreate(username=DEFAULT_ADMIN_USERNAME, password=DEFAULT_ADMIN_PASSWORD)
        )
        created["users"] += 1

    projects = ProjectService(db)
    for item in SAMPLE_PROJECTS:
        if not _exists(db, "projects", "slug", item["slug"]):
            await projects.create(ProjectCreate(**item))
            created["projects"] += 1

    wruas = WruaService(db)
    for item in SAMPLE_WRUAS:
        if not _exists(db, "wruas", "name", item["name"]):
            await wruas.create(WruaCreate(**item))
            created["wruas"] += 1

    posts = BlogService(db)
    for item in SAMPLE_BLOG_POSTS:
        if not _exists(db, "blog_posts", "slug", item["slug"]):
            await posts.create(BlogPostCreate(**item))
            created["blog_posts"] += 1

    funding = FundingService(db)
    for item in SAMPLE_FUNDING:
        if not _exists(db, "funding_opportunities", "name", item["name"]):
            await funding.create(FundingOpportunityCreate(**item))
            created["funding"] += 1

    await SettingsService(db).upsert_setting(STATS_KEY, dict(DEFAULT_STATS))
    logger.info("Seed complete: %s", created)
    return created
