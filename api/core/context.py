from contextvars import ContextVar, Token

# 요청 단위 추적 정보 (로그 포맷터가 읽음)
trace_id_var: ContextVar[str] = ContextVar("trace_id", default="-")
client_ip_var: ContextVar[str] = ContextVar("client_ip", default="-")


def bind_request(trace_id: str, client_ip: str) -> tuple[Token, Token]:
    return trace_id_var.set(trace_id), client_ip_var.set(client_ip)


def unbind_request(tokens: tuple[Token, Token]):
    trace_token, ip_token = tokens
    trace_id_var.reset(trace_token)
    client_ip_var.reset(ip_token)
