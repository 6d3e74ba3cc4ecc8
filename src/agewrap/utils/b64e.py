import base64

def b64e(data: bytes) -> str:
    """Standard base64 encode without padding"""
    return base64.b64encode(data).decode("ascii").rstrip("=")
