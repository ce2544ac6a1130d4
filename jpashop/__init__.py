"""JPA Shop Service - 회원, 상품, 주문 관리 백엔드"""

__version__ = "0.1.0"
