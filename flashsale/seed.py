import logging

from flashsale.models.flash_sale import FlashSale
from flashsale.models.product import Product
from flashsale.models.status import SaleStatus, StatusOption

logger = logging.getLogger(__name__)

STATUS_OPTIONS: tuple[StatusOption, ...] = (
    StatusOption(value=SaleStatus.ACTIVE, label="Active"),
    StatusOption(value=SaleStatus.INACTIVE, label="Inactive"),
    StatusOption(value=SaleStatus.SCHEDULED, label="Scheduled"),
    StatusOption(value=SaleStatus.EXPIRED, label="Expired"),
)

AVAILABLE_PRODUCTS: tuple[Product, ...] = (
    Product(id=1, name="Premium Poultry Feed 25kg", category="poultry", price=850.00),
    Product(id=2, name="Fish Feed Pellets 10kg", category="fish", price=250.00),
    Product(id=3, name="Shrimp Feed Special 20kg", category="shrimp", price=1200.00),
    Product(id=4, name="Organic Poultry Starter 15kg", category="poultry", price=650.00),
    Product(id=5, name="Premium Fish Food 5kg", category="fish", price=180.00),
    Product(id=6, name="Advanced Shrimp Nutrition 10kg", category="shrimp", price=800.00),
    Product(id=7, name="Poultry Growth Formula 30kg", category="poultry", price=950.00),
    Product(id=8, name="Marine Fish Feed 8kg", category="fish", price=320.00),
    Product(id=9, name="Shrimp Breeding Feed 12kg", category="shrimp", price=1100.00),
    Product(id=10, name="Layer Feed Premium 20kg", category="poultry", price=750.00),
)


FLASH_SALE_DATA: tuple[FlashSale, ...] = (
    FlashSale(
        id=1,
        sale_name="Summer Feed Festival",
        products=[1, 2, 3],
        discount_percentage=25,
        start_date="2024-01-20T00:00:00Z",
        end_date="2024-01-25T23:59:59Z",
        status=SaleStatus.ACTIVE,
        created_date="2024-01-15T10:30:00Z",
        total_sales=45,
        revenue=125000,
    ),
    FlashSale(
        id=2,
        sale_name="Poultry Power Sale",
        products=[1, 4, 7, 10],
        discount_percentage=15,
        start_date="2024-01-22T06:00:00Z",
        end_date="2024-01-28T18:00:00Z",
        status=SaleStatus.SCHEDULED,
        created_date="2024-01-14T14:15:00Z",
        total_sales=0,
        revenue=0,
    ),
    FlashSale(
        id=3,
        sale_name="Aquatic Feed Bonanza",
        products=[2, 5, 8],
        discount_percentage=30,
        start_date="2024-01-10T00:00:00Z",
        end_date="2024-01-15T23:59:59Z",
        status=SaleStatus.EXPIRED,
        created_date="2024-01-08T09:45:00Z",
        total_sales=67,
        revenue=89500,
    ),
    FlashSale(
        id=4,
        sale_name="Shrimp Special Weekend",
        products=[3, 6, 9],
        discount_percentage=20,
        start_date="2024-01-18T00:00:00Z",
        end_date="2024-01-21T23:59:59Z",
        status=SaleStatus.ACTIVE,
        created_date="2024-01-12T16:20:00Z",
        total_sales=23,
        revenue=67800,
    ),
    FlashSale(
        id=5,
        sale_name="New Year Feed Sale",
        products=[1, 2, 3, 4, 5],
        discount_percentage=35,
        start_date="2024-01-01T00:00:00Z",
        end_date="2024-01-07T23:59:59Z",
        status=SaleStatus.EXPIRED,
        created_date="2023-12-28T11:30:00Z",
        total_sales=156,
        revenue=234500,
    ),
    FlashSale(
        id=6,
        sale_name="Mega Feed Discount",
        products=[6, 7, 8, 9, 10],
        discount_percentage=40,
        start_date="2024-02-01T00:00:00Z",
        end_date="2024-02-05T23:59:59Z",
        status=SaleStatus.SCHEDULED,
        created_date="2024-01-11T13:25:00Z",
        total_sales=0,
        revenue=0,
    ),
    FlashSale(
        id=7,
        sale_name="Flash Friday Sale",
        products=[1, 5, 9],
        discount_percentage=50,
        start_date="2024-01-19T00:00:00Z",
        end_date="2024-01-19T23:59:59Z",
        status=SaleStatus.EXPIRED,
        created_date="2024-01-18T12:10:00Z",
        total_sales=89,
        revenue=78900,
    ),
    FlashSale(
        id=8,
        sale_name="Premium Feed Showcase",
        products=[3, 7, 10],
        discount_percentage=12,
        start_date="2024-01-25T12:00:00Z",
        end_date="2024-01-30T12:00:00Z",
        status=SaleStatus.INACTIVE,
        created_date="2024-01-20T15:45:00Z",
        total_sales=0,
        revenue=0,
    ),
)


def seed_board(board) -> None:
    """Load the sample sales into a working copy. The constants stay untouched."""
    board.load(FLASH_SALE_DATA)


def seed() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    logger.info("%d status options", len(STATUS_OPTIONS))
    logger.info("%d products: %s", len(AVAILABLE_PRODUCTS), ", ".join(p.name for p in AVAILABLE_PRODUCTS))
    for sale in FLASH_SALE_DATA:
        logger.info(
            "sale #%d %s [%s] %d%% off, products=%s",
            sale.id,
            sale.sale_name,
            sale.status.value,
            sale.discount_percentage,
            sale.products,
        )


if __name__ == "__main__":
    seed()
