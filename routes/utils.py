TRUTHY_VALUES = {"1", "true", "yes", "y", "on"}


def parse_confirmed(req) -> bool:
    """삭제 확인 여부 해석.

    JSON 본문의 "confirmed" 값이 우선이고, 없으면 쿼리스트링 ?confirmed= 를 본다.
    명시적으로 확인하지 않은 요청은 모두 거절로 취급한다.
    """
    data = req.get_json(silent=True)
    if isinstance(data, dict) and "confirmed" in data:
        value = data["confirmed"]
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in TRUTHY_VALUES
    return str(req.args.get("confirmed", "")).strip().lower() in TRUTHY_VALUES
