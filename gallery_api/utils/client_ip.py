"""
클라이언트 IP 추출 유틸리티.

프록시나 로드밸런서를 거치는 경우 실제 클라이언트 IP를 추출합니다.
Rate limiting 키와 요청 로그에 사용됩니다.
"""
from fastapi import Request


def get_client_ip(request: Request) -> str:
    """
    요청에서 실제 클라이언트 IP를 추출합니다.

    확인 순서:
    1. X-Forwarded-For (쉼표로 구분된 IP 리스트의 첫 번째)
    2. X-Real-IP (nginx 등에서 설정)
    3. CF-Connecting-IP (Cloudflare)
    4. request.client.host (직접 연결)

    Security:
        이 헤더들은 위조 가능하므로 신뢰할 수 있는 프록시 뒤에서만 의미가 있습니다.
    """
    x_forwarded_for = request.headers.get("X-Forwarded-For")
    if x_forwarded_for:
        client_ip = x_forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip

    x_real_ip = request.headers.get("X-Real-IP")
    if x_real_ip:
        return x_real_ip.strip()

    cf_connecting_ip = request.headers.get("CF-Connecting-IP")
    if cf_connecting_ip:
        return cf_connecting_ip.strip()

    if request.client:
        return request.client.host

    return "unknown"
