import copy
import json
from pathlib import Path

from services.flight.domain.factory import FlightRecord

DEFAULT_FLIGHTS: list[FlightRecord] = [
    {
        "flight_id": "FL001",
        "origin": "NYC",
        "destination": "LON",
        "date": "2025-10-15",
        "time": "10:00",
        "price": 500,
        "seats": 150,
    },
    {
        "flight_id": "FL002",
        "origin": "NYC",
        "destination": "PAR",
        "date": "2025-10-15",
        "time": "14:00",
        "price": 450,
        "seats": 120,
    },
    {
        "flight_id": "FL003",
        "origin": "LON",
        "destination": "NYC",
        "date": "2025-10-20",
        "time": "09:00",
        "price": 520,
        "seats": 150,
    },
    {
        "flight_id": "FL004",
        "origin": "PAR",
        "destination": "NYC",
        "date": "2025-10-20",
        "time": "11:00",
        "price": 480,
        "seats": 120,
    },
]


def load_flight_records(path: str | None = None) -> list[FlightRecord]:
    """便の初期データを読み込む

    path が未指定の場合は組み込みの初期データを返す。
    JSON ファイルは FlightRecord の配列であること。
    """
    if not path:
        return copy.deepcopy(DEFAULT_FLIGHTS)

    records = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(records, list):
        raise ValueError(f"Flight seed file must contain a JSON array: {path}")
    return records
