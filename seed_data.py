from sqlmodel import Session
from app.db.session import engine, create_db_and_tables
from app.models.product import Product
from app.repositories import ProductRepository

def seed_products():
    print("Creating database and tables...")
    create_db_and_tables()

    with Session(engine) as session:
        repo = ProductRepository(session)
        # Check if products already exist to avoid duplicates
        existing_products = repo.find_all()
        if existing_products:
            print(f"Database already contains {len(existing_products)} products. Skipping seed.")
            return

        print("Seeding initial products...")
        products = [
            Product(name="UNIFACTOR Mens Running Shoes", category="Fashion", cost=50, rating=5,
                    image="/images/running-shoes.png"),
            Product(name="YONEX Smash Badminton Racquet", category="Sports", cost=100, rating=5,
                    image="/images/badminton-racquet.png"),
            Product(name="Tan Leatherette Weekender Duffle", category="Fashion", cost=150, rating=4,
                    image="/images/duffle-bag.png"),
            Product(name="The Minimalist Slim Leather Watch", category="Electronics", cost=60, rating=5,
                    image="/images/leather-watch.png"),
            Product(name="Atomberg 1200mm BLDC Ceiling Fan", category="Home & Kitchen", cost=300, rating=4,
                    image="/images/ceiling-fan.png"),
        ]

        for product in products:
            repo.save(product, commit=False)
        repo.commit()
        print(f"Successfully seeded {len(products)} products!")

if __name__ == "__main__":
    seed_products()
