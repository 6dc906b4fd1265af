"""
cli - 명령줄 인터페이스 (click), 콘솔 출력 (rich), 다국어 메시지
"""
