"""
启动时加载的示例数据
"""
import logging

from .models import Author, Book, Customer
from .repositories import AuthorRepository, BookRepository, CustomerRepository, DataStore

logger = logging.getLogger(__name__)

SAMPLE_AUTHORS = [
    {"name": "J.K. Rowling", "biography": "British author best known for the Harry Potter series."},
    {"name": "George Orwell", "biography": "English novelist, essayist, and critic."},
]

# author 为 SAMPLE_AUTHORS 中的下标
SAMPLE_BOOKS = [
    {"title": "Harry Potter and the Philosopher's Stone", "author": 0,
     "isbn": "978-0-7475-3269-9", "publication_year": 1997, "price": 15.99, "stock": 100},
    {"title": "Harry Potter and the Chamber of Secrets", "author": 0,
     "isbn": "978-0-7475-3849-9", "publication_year": 1998, "price": 16.99, "stock": 85},
    {"title": "1984", "author": 1,
     "isbn": "978-0-451-52493-5", "publication_year": 1949, "price": 12.99, "stock": 50},
]

SAMPLE_CUSTOMERS = [
    {"name": "John Doe", "email": "john.doe@example.com", "password": "password123"},
]


def load_sample_data(store: DataStore) -> None:
    """写入示例作者、书籍和客户"""
    author_repo = AuthorRepository(store)
    book_repo = BookRepository(store)
    customer_repo = CustomerRepository(store)

    authors = [author_repo.create(Author(**data)) for data in SAMPLE_AUTHORS]
    for data in SAMPLE_BOOKS:
        data = dict(data)
        author = authors[data.pop("author")]
        book_repo.create(Book(author_id=author.id, **data))
    for data in SAMPLE_CUSTOMERS:
        customer_repo.create(Customer(**data))

    logger.info(f"示例数据加载完成: {store.stats()}")
