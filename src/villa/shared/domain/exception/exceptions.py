class DomainException(Exception):
    """ドメイン層で発生する基底例外（メッセージはそのままクライアントに返す）"""


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合（例: "Booking not found"）"""

    def __init__(self, resource: str) -> None:
        super().__init__(f"{resource} not found")
        self.resource = resource


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合（予約ステータスの逆行など）"""


class DuplicateResourceException(DomainException):
    """一意キーが既に使われている場合"""

    def __init__(self, resource: str, key: str) -> None:
        super().__init__(f"{resource} already exists: {key}")
        self.resource = resource
        self.key = key
