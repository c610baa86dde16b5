class StorefrontError(Exception):
    """Базовая ошибка магазина"""

    message = "Storefront error"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class InvalidCartError(StorefrontError):
    """Корзина или позиция корзины не прошли проверку (ошибка клиента)"""

    message = "Invalid item"


class EmptyCartError(InvalidCartError):
    message = "No items"


class ProductNotFoundError(StorefrontError):
    message = "Not found"

    def __init__(self, product_id: str):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class OrderStoreError(StorefrontError):
    """Сбой хранилища заказов; транзакция уже откатана"""

    message = "DB error"
