"""
🌱 DATABASE SEED
Fill a fresh database with demo content for the marketing site.

Usage:
    python -m app.seed            # create tables (if needed) and insert demo data
    python -m app.seed --reset    # drop every table first, then seed
    python -m app.seed --help

Requires DATABASE_URL (read from the environment or a .env file).
"""

import sys

from dotenv import load_dotenv

from app.database import Database
from app.services import blog, company, pricing, projects, users

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"

COMPANY_INFO = {
    "company_name": "RakitDev",
    "tagline": "Building Digital Dreams into Reality",
    "description": (
        "RakitDev is a web development studio focused on modern, responsive and "
        "user-friendly web applications for growing businesses."
    ),
    "email": "hello@rakitdev.com",
    "phone": "+62 812-3456-7890",
    "address": "Jakarta, Indonesia",
    "logo_url": "/logo.png",
    "social_media": {
        "facebook": "https://facebook.com/rakitdev",
        "twitter": "https://twitter.com/rakitdev",
        "instagram": "https://instagram.com/rakitdev",
        "linkedin": "https://linkedin.com/company/rakitdev",
        "github": "https://github.com/rakitdev",
    },
    "working_hours": "Mon-Fri: 9:00 AM - 6:00 PM",
    "founded_year": 2020,
    "team_size": "10-20",
    "projects_completed": 50,
    "years_experience": 5,
}

PRICING_PLANS = [
    {
        "name": "Starter",
        "description": "Perfect for small businesses and startups",
        "price": 5000000,
        "currency": "IDR",
        "duration": "one-time",
        "features": [
            "Responsive Design",
            "Up to 5 Pages",
            "Contact Form",
            "Basic SEO",
            "1 Month Support",
            "Mobile Friendly",
        ],
        "popular": False,
        "order": 1,
        "active": True,
    },
    {
        "name": "Professional",
        "description": "Best for growing businesses",
        "price": 15000000,
        "currency": "IDR",
        "duration": "one-time",
        "features": [
            "Everything in Starter",
            "Up to 15 Pages",
            "CMS Integration",
            "Advanced SEO",
            "3 Months Support",
            "Analytics Dashboard",
            "Social Media Integration",
            "Blog System",
        ],
        "popular": True,
        "order": 2,
        "active": True,
    },
    {
        "name": "Enterprise",
        "description": "For large-scale applications",
        "price": 30000000,
        "currency": "IDR",
        "duration": "one-time",
        "features": [
            "Everything in Professional",
            "Unlimited Pages",
            "Custom Features",
            "E-commerce Integration",
            "6 Months Support",
            "Performance Optimization",
            "Security Features",
            "API Integration",
            "Admin Dashboard",
            "Priority Support",
        ],
        "popular": False,
        "order": 3,
        "active": True,
    },
]

PROJECTS = [
    {
        "title": "E-Commerce Platform",
        "description": "Modern e-commerce solution with advanced features",
        "long_description": (
            "A full-featured e-commerce platform with product management, shopping cart, "
            "payment integration and an admin dashboard. Designed for scalability and performance."
        ),
        "category": "E-Commerce",
        "image_url": "https://images.unsplash.com/photo-1557821552-17105176677c?w=800",
        "technologies": ["React", "Node.js", "PostgreSQL", "Stripe", "Tailwind CSS"],
        "live_url": "https://demo-ecommerce.rakitdev.com",
        "github_url": "https://github.com/rakitdev/ecommerce",
        "featured": True,
        "order": 1,
    },
    {
        "title": "Corporate Website",
        "description": "Professional corporate website with modern design",
        "long_description": (
            "A sleek corporate website featuring company information, services showcase, "
            "team profiles and contact forms. Optimized for SEO and mobile devices."
        ),
        "category": "Corporate",
        "image_url": "https://images.unsplash.com/photo-1460925895917-afdab827c52f?w=800",
        "technologies": ["Next.js", "TypeScript", "Tailwind CSS", "Framer Motion"],
        "live_url": "https://corporate-demo.rakitdev.com",
        "featured": True,
        "order": 2,
    },
    {
        "title": "Restaurant Management System",
        "description": "Complete solution for restaurant operations",
        "long_description": (
            "Online ordering, table reservations, menu management and a kitchen display, "
            "with both customer-facing and admin interfaces."
        ),
        "category": "SaaS",
        "image_url": "https://images.unsplash.com/photo-1414235077428-338989a2e8c0?w=800",
        "technologies": ["React", "Express", "MongoDB", "Socket.io"],
        "live_url": "https://resto-demo.rakitdev.com",
        "featured": True,
        "order": 3,
    },
    {
        "title": "Real Estate Portal",
        "description": "Property listing and management platform",
        "long_description": (
            "List, search and manage properties with advanced filters, virtual tours, "
            "agent profiles and inquiry management."
        ),
        "category": "Portal",
        "image_url": "https://images.unsplash.com/photo-1560518883-ce09059eeffa?w=800",
        "technologies": ["Vue.js", "Laravel", "MySQL", "Google Maps API"],
        "live_url": "https://realestate-demo.rakitdev.com",
        "featured": False,
        "order": 4,
    },
    {
        "title": "Learning Management System",
        "description": "Online education platform",
        "long_description": (
            "Create and deliver online courses with video hosting, quizzes, assignments, "
            "progress tracking and certificates."
        ),
        "category": "Education",
        "image_url": "https://images.unsplash.com/photo-1501504905252-473c47e087f8?w=800",
        "technologies": ["React", "Node.js", "PostgreSQL", "AWS S3"],
        "live_url": "https://lms-demo.rakitdev.com",
        "featured": False,
        "order": 5,
    },
    {
        "title": "Healthcare Appointment System",
        "description": "Medical appointment booking platform",
        "long_description": (
            "Real-time availability, appointment scheduling, medical records and "
            "telemedicine for patients and doctors."
        ),
        "category": "Healthcare",
        "image_url": "https://images.unsplash.com/photo-1576091160399-112ba8d25d1d?w=800",
        "technologies": ["React", "Node.js", "PostgreSQL", "WebRTC"],
        "live_url": "https://healthcare-demo.rakitdev.com",
        "featured": False,
        "order": 6,
    },
]

BLOG_POSTS = [
    {
        "title": "10 Best Practices for Modern Web Development",
        "slug": "10-best-practices-modern-web-development",
        "excerpt": (
            "Discover the essential best practices that every modern web developer should "
            "follow to build scalable and maintainable applications."
        ),
        "content": (
            "# 10 Best Practices for Modern Web Development\n\n"
            "## 1. Mobile-First Approach\nDesign for small screens first, then scale up.\n\n"
            "## 2. Component-Based Architecture\nBreak the UI into reusable components.\n\n"
            "## 3. Performance Optimization\nOptimize images, minimize code, lazy load.\n\n"
            "## 4. Security First\nValidate input, use HTTPS, get auth right.\n\n"
            "## 5. Accessibility\nBuild for every user.\n\n"
            "## 6. Version Control\nUse Git and a clear branching strategy.\n\n"
            "## 7. Automated Testing\nUnit, integration and end-to-end tests.\n\n"
            "## 8. Documentation\nKeep code and API docs current.\n\n"
            "## 9. CI/CD\nAutomate builds and deployments.\n\n"
            "## 10. Code Reviews\nShare knowledge and keep quality high.\n"
        ),
        "cover_image": "https://images.unsplash.com/photo-1498050108023-c5249f4df085?w=800",
        "author": "RakitDev Team",
        "category": "Development",
        "tags": ["Web Development", "Best Practices", "Tutorial"],
        "published": True,
        "read_time": 8,
    },
    {
        "title": "Getting Started with React and TypeScript",
        "slug": "getting-started-react-typescript",
        "excerpt": "Learn how to set up and build your first React application with TypeScript for type-safe development.",
        "content": (
            "# Getting Started with React and TypeScript\n\n"
            "## Why TypeScript?\n- Type safety prevents runtime errors\n- Better IDE support\n"
            "- Easier refactoring\n\n"
            "## Setting Up\n```bash\nnpx create-react-app my-app --template typescript\n```\n"
        ),
        "cover_image": "https://images.unsplash.com/photo-1633356122544-f134324a6cee?w=800",
        "author": "RakitDev Team",
        "category": "Tutorial",
        "tags": ["React", "TypeScript", "Tutorial"],
        "published": True,
        "read_time": 5,
    },
    {
        "title": "The Future of Web Development: Trends to Watch in 2025",
        "slug": "future-web-development-2025",
        "excerpt": "Explore the emerging trends and technologies that are shaping the future of web development.",
        "content": (
            "# The Future of Web Development\n\n"
            "## 1. AI-Powered Development\n## 2. Edge Computing\n## 3. WebAssembly\n"
            "## 4. Progressive Web Apps\n## 5. Serverless Architecture\n## 6. Micro-Frontends\n"
        ),
        "cover_image": "https://images.unsplash.com/photo-1451187580459-43490279c0fa?w=800",
        "author": "RakitDev Team",
        "category": "Technology",
        "tags": ["Future", "Trends", "Web Development"],
        "published": True,
        "read_time": 6,
    },
    {
        "title": "Building Scalable APIs with Node.js and Express",
        "slug": "building-scalable-apis-nodejs-express",
        "excerpt": "Learn how to design and build RESTful APIs that can scale with your application's growth.",
        "content": (
            "# Building Scalable APIs\n\n"
            "## Architecture Principles\n- Separation of concerns\n- Stateless design\n"
            "- Proper error handling\n- Caching strategies\n"
        ),
        "cover_image": "https://images.unsplash.com/photo-1558494949-ef010cbdcc31?w=800",
        "author": "RakitDev Team",
        "category": "Backend",
        "tags": ["Node.js", "Express", "API", "Tutorial"],
        "published": True,
        "read_time": 10,
    },
    {
        "title": "CSS Grid vs Flexbox: When to Use Which",
        "slug": "css-grid-vs-flexbox",
        "excerpt": "A comprehensive comparison of CSS Grid and Flexbox to help you choose the right layout tool.",
        "content": (
            "# CSS Grid vs Flexbox\n\n"
            "## Flexbox\nOne-dimensional layouts: navigation bars, card rows.\n\n"
            "## CSS Grid\nTwo-dimensional layouts: pages, dashboards, magazine grids.\n"
        ),
        "cover_image": "https://images.unsplash.com/photo-1507721999472-8ed4421c4af2?w=800",
        "author": "RakitDev Team",
        "category": "CSS",
        "tags": ["CSS", "Grid", "Flexbox", "Tutorial"],
        "published": True,
        "read_time": 7,
    },
]


def seed(database: Database):
    """Insert the demo content. Expects empty tables."""
    db = database.session()

    try:
        print("Creating admin user...")
        users.create_user(db, {
            "username": ADMIN_USERNAME,
            "password": users.hash_password(ADMIN_PASSWORD),
            "role": "admin",
        })
        print("✅ Admin user created")

        print("Creating company info...")
        company.update_company_info(db, dict(COMPANY_INFO))
        print("✅ Company info created")

        print("Creating pricing plans...")
        for plan in PRICING_PLANS:
            pricing.create_pricing_plan(db, dict(plan))
        print(f"✅ {len(PRICING_PLANS)} pricing plans created")

        print("Creating projects...")
        for project in PROJECTS:
            projects.create_project(db, dict(project))
        print(f"✅ {len(PROJECTS)} projects created")

        print("Creating blog posts...")
        for post in BLOG_POSTS:
            blog.create_blog_post(db, dict(post))
        print(f"✅ {len(BLOG_POSTS)} blog posts created")
    finally:
        db.close()


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    if "--help" in argv or "-h" in argv:
        print(__doc__)
        return 0

    load_dotenv()

    try:
        database = Database()
    except RuntimeError as e:
        print(f"❌ Error: {e}")
        print("Please set DATABASE_URL in your .env file")
        return 1

    print("🌱 Starting database seed...")
    try:
        if "--reset" in argv:
            print("Dropping existing tables...")
            database.drop_all()
        database.create_all()
        seed(database)
    except Exception as e:
        print(f"❌ Error seeding database: {e}")
        return 1
    finally:
        database.dispose()

    print("🎉 Database seeded successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
