from hometasks.db.session import engine
from hometasks.db.base import Base
def init():
    Base.metadata.create_all(bind=engine)
if __name__ == "__main__":
    init()
    print("Database schema created.")
