
class ErrorMessages:
    EMAIL_ALREADY_EXISTS = "이미 존재하는 이메일입니다."
    PASSWORD_MISMATCH = "비밀번호가 일치하지 않습니다."
    PASSWORD_COMPLEXITY = "비밀번호는 영문자와 숫자를 포함해야 합니다."
    INVALID_CREDENTIALS = "이메일 또는 비밀번호가 잘못되었습니다."
    USER_MISMATCH = "해당 사용자를 찾을 수 없습니다."
    INVALID_AUTHENTICATION = "유효하지 않은 인증 정보입니다."

    # 상품
    PRODUCT_NOT_FOUND = "해당 상품을 찾을 수 없습니다."
    PRODUCT_FORBIDDEN = "본인이 등록한 상품만 수정할 수 있습니다."

    # 선호 말투
    NOT_EXIST_KIND = "존재하지 않는 종류입니다."


class NotExistKind(ValueError):
    """선호 말투 조회 종류(kind)가 지원하지 않는 값일 때 발생"""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(ErrorMessages.NOT_EXIST_KIND)
