from dataclasses import dataclass


@dataclass(frozen=True)
class GuestContact:
    """予約者の連絡先

    電話番号は任意。未入力（空文字を含む）の場合は None に正規化する。
    """

    name: str
    email: str
    phone: str | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Guest name is required")
        if "@" not in self.email:
            raise ValueError("Valid email is required")
        if self.phone is not None and not self.phone.strip():
            object.__setattr__(self, "phone", None)
