import logging
from datetime import date
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from tenacity import retry, stop_after_attempt, wait_fixed

from database.database import engine as default_engine
from database.models import Base
from database.uow import matching_uow

logger = logging.getLogger(__name__)

SAMPLE_CLIENTS = [
    {'name': 'Arjun Sharma', 'email': 'arjun@sustainablefashion.com', 'company': 'EcoStyle Brand',
     'city': 'Mumbai', 'industry': 'Fashion'},
    {'name': 'Priya Patel', 'email': 'priya@techstartup.com', 'company': 'InnovateTech',
     'city': 'Bangalore', 'industry': 'Technology'},
    {'name': 'Rahul Verma', 'email': 'rahul@foodbrand.com', 'company': 'Organic Delights',
     'city': 'Delhi', 'industry': 'Food & Beverage'},
]

SAMPLE_TALENTS = [
    {
        'name': 'Kavya Menon', 'email': 'kavya@photographer.com', 'city': 'Goa',
        'categories': ['Photography', 'Travel'],
        'skills': ['Portrait Photography', 'Travel Photography', 'Natural Light',
                   'Candid Shots', 'Sustainable Fashion'],
        'experience_years': 3, 'min_budget': 50000, 'max_budget': 100000,
        'portfolio_links': ['https://instagram.com/kavyalens', 'https://kavyamenon.com'],
        'bio': 'Passionate travel photographer specializing in sustainable fashion and natural '
               'portraits. Based in Goa with 3+ years experience.',
        'instagram_handle': '@kavyalens',
    },
    {
        'name': 'Rohan Singh', 'email': 'rohan@designer.com', 'city': 'Mumbai',
        'categories': ['Design', 'UI/UX'],
        'skills': ['UI Design', 'Brand Identity', 'Mobile App Design', 'Figma', 'Adobe Creative Suite'],
        'experience_years': 4, 'min_budget': 75000, 'max_budget': 150000,
        'portfolio_links': ['https://behance.net/rohansingh', 'https://rohandesigns.com'],
        'bio': 'Senior UI/UX designer with expertise in mobile apps and brand identity. '
               '4 years of startup experience.',
        'instagram_handle': '@rohandesigns',
    },
    {
        'name': 'Anisha Reddy', 'email': 'anisha@videographer.com', 'city': 'Hyderabad',
        'categories': ['Videography', 'Film'],
        'skills': ['Corporate Videos', 'Product Photography', 'Video Editing',
                   'Drone Photography', 'Commercial Shoots'],
        'experience_years': 2, 'min_budget': 60000, 'max_budget': 120000,
        'portfolio_links': ['https://vimeo.com/anishareddy', 'https://anishacreates.com'],
        'bio': 'Creative videographer specializing in corporate and product content. '
               'Drone certified with 2+ years experience.',
        'instagram_handle': '@anishacreates',
    },
]

# Keyed by the owning client's email
SAMPLE_GIGS = [
    ('arjun@sustainablefashion.com', {
        'title': 'Sustainable Fashion Campaign Shoot',
        'description': 'Looking for a travel photographer in Goa for 3 days in November for a '
                       'sustainable fashion brand. Need pastel tones and candid portraits.',
        'category': 'Photography',
        'required_skills': ['Travel Photography', 'Fashion Photography', 'Portrait Photography', 'Natural Light'],
        'location': 'Goa', 'is_remote': False, 'start_date': date(2024, 11, 15), 'duration_days': 3,
        'min_budget': 70000, 'max_budget': 90000,
        'style_preferences': ['Pastel Tones', 'Candid Portraits', 'Natural Light', 'Sustainable Fashion'],
        'additional_requirements': 'Must have experience with sustainable fashion brands. Portfolio review required.',
    }),
    ('priya@techstartup.com', {
        'title': 'Mobile App UI Design',
        'description': 'Need a UI/UX designer to create modern mobile app interface for a fintech '
                       'startup. Clean, minimal design preferred.',
        'category': 'Design',
        'required_skills': ['UI Design', 'Mobile App Design', 'Figma', 'User Experience'],
        'location': 'Remote', 'is_remote': True, 'start_date': date(2024, 12, 1), 'duration_days': 14,
        'min_budget': 80000, 'max_budget': 120000,
        'style_preferences': ['Minimal Design', 'Modern UI', 'Fintech Style'],
        'additional_requirements': 'Must have fintech or financial app experience. Figma proficiency required.',
    }),
    ('rahul@foodbrand.com', {
        'title': 'Product Video Campaign',
        'description': 'Create engaging product videos for organic food brand launch. Need someone '
                       'who can handle both shooting and editing.',
        'category': 'Videography',
        'required_skills': ['Product Photography', 'Video Editing', 'Commercial Shoots'],
        'location': 'Delhi', 'is_remote': False, 'start_date': date(2024, 11, 30), 'duration_days': 5,
        'min_budget': 65000, 'max_budget': 85000,
        'style_preferences': ['Clean Aesthetics', 'Natural Lighting', 'Food Styling'],
        'additional_requirements': 'Experience with food photography/videography essential. '
                                   'Should provide editing services.',
    }),
]


@retry(stop=stop_after_attempt(5), wait=wait_fixed(2), reraise=True)
def init_db(engine: Optional[Engine] = None):
    logger.info("Initializing database...")
    try:
        Base.metadata.create_all(bind=engine or default_engine)
        logger.info("Tables created or verified.")
    except Exception as e:
        logger.error(f"Error initializing DB: {e}")
        raise


def seed_sample_data(session_factory: Optional[sessionmaker] = None) -> int:
    """Insert the demo clients, talents and gigs; existing rows are left alone.

    Returns the number of gigs created.
    """
    created = 0
    with matching_uow(session_factory) as repo:
        clients = {data['email']: repo.clients.get_or_create(dict(data)) for data in SAMPLE_CLIENTS}

        for data in SAMPLE_TALENTS:
            repo.talents.get_or_create(dict(data))

        for client_email, data in SAMPLE_GIGS:
            client = clients[client_email]
            if repo.gigs.get_by_title(client.id, data['title']) is None:
                repo.gigs.create_gig({**data, 'client_id': client.id})
                created += 1

    logger.info(f"✅ Sample data inserted ({created} new gigs)")
    return created


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    seed_sample_data()
