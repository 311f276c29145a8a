from datetime import datetime


def one_year_before(moment: datetime) -> datetime:
    """
    달력 기준 1년 전 시각을 돌려줍니다. 2월 29일은 전년도 2월 28일로 맞춥니다.
    """
    try:
        return moment.replace(year=moment.year - 1)
    except ValueError:
        return moment.replace(year=moment.year - 1, day=28)
