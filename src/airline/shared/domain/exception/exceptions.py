class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class InvalidKeyException(DomainException):
    """フライトの主キー(パーティションキー / ソートキー)が不正な場合

    ストアへ到達する前、キーの構築時点で送出される。
    """

    pass
