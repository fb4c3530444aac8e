# votehub/services/voting_window.py
from datetime import date, datetime, time

UPCOMING = "upcoming"
OPEN = "open"
CLOSED = "closed"

def get_voting_status(
    event_date: date,
    start_time: time,
    close_time: time,
    is_voting_open: bool | None,
    now: datetime | None = None
) -> str:
    """
    투표 상태 계산
    - is_voting_open True/False 면 수동 설정 우선
    - None 이면 일정 기준 (시작 전 upcoming, 기간 중 open, 종료 후 closed)
    """

    # 수동 설정
    if is_voting_open is True:
        return OPEN
    if is_voting_open is False:
        return CLOSED

    # 로컬 시간 기준
    start = datetime.combine(event_date, start_time)
    end = datetime.combine(event_date, close_time)
    now = now or datetime.now()

    if now < start:
        return UPCOMING
    if now <= end:
        return OPEN
    return CLOSED
