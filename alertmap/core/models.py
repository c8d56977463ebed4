"""
Core domain models for alert-map.

This module defines the alert records as they arrive from the
archive (camelCase keys, loosely typed geometry) and the normalized
shapes derived from them, using Pydantic v2 for validation.
All models are frozen: derivations read alerts, never mutate them.
"""

import math
from typing import Annotated, Any, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator, model_validator

from alertmap.common.geo import LatLng

_RAW_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

def _object_list(value: Any) -> Any:
    # 피드에서 null 이나 목록이 아닌 값으로 오는 목록 필드, 객체가 아닌 항목은 버림
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, (dict, BaseModel))]

def _loose_text(value: Any) -> Any:
    # 숫자는 문자열로, 그 외 문자열이 아닌 값은 None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None

T = TypeVar("T")

# null/형식 오류 허용 목록
NullableList = Annotated[List[T], BeforeValidator(_object_list)]
# 형식 오류 허용 문자열
LooseText = Annotated[Optional[str], BeforeValidator(_loose_text)]

class PolygonGeometry(BaseModel):
    """원시 폴리곤 모델 (GeoJSON, 경도/위도 순서)"""
    model_config = _RAW_CONFIG

    type: Any = "Polygon"
    coordinates: Any = None

class CircleGeometry(BaseModel):
    """원시 원형 영역 모델 (중심 경도/위도, 반경 km)"""
    model_config = _RAW_CONFIG

    type: Any = "Circle"
    coordinates: Any = None
    radius: Any = None

class Geocode(BaseModel):
    model_config = _RAW_CONFIG

    value_name: LooseText = Field(default=None, alias="valueName")
    value: LooseText = None

class EventCode(BaseModel):
    model_config = _RAW_CONFIG

    value_name: LooseText = Field(default=None, alias="valueName")
    value: LooseText = None

class AlertArea(BaseModel):
    """경보 영역 모델"""
    model_config = _RAW_CONFIG

    area_desc: LooseText = Field(default=None, alias="areaDesc")
    polygon: Optional[PolygonGeometry] = None
    circle: Optional[CircleGeometry] = None
    geocode: NullableList[Geocode] = Field(default_factory=list)

    @field_validator("polygon", "circle", mode="before")
    @classmethod
    def drop_non_object_geometry(cls, value: Any) -> Any:
        # 객체가 아닌 형상은 "없음"으로 취급
        return value if isinstance(value, (dict, BaseModel)) else None

class AlertInfo(BaseModel):
    """경보 상세 정보 모델"""
    model_config = _RAW_CONFIG

    headline: LooseText = None
    description: LooseText = None
    instruction: LooseText = None
    severity: LooseText = None
    urgency: LooseText = None
    certainty: LooseText = None
    effective: LooseText = None
    expires: LooseText = None
    event_code: NullableList[EventCode] = Field(default_factory=list, alias="eventCode")
    areas: NullableList[AlertArea] = Field(default_factory=list, alias="area")

class Alert(BaseModel):
    """IPAWS 경보 모델"""
    model_config = _RAW_CONFIG

    # 아카이브는 cogId 를 숫자로 내려주기도 함
    cog_id: LooseText = Field(default=None, alias="cogId")
    identifier: str = ""
    sent: LooseText = None
    msg_type: LooseText = Field(default=None, alias="msgType")
    source: LooseText = None
    info: NullableList[AlertInfo] = Field(default_factory=list)

    @field_validator("identifier", mode="before")
    @classmethod
    def identifier_as_text(cls, value: Any) -> Any:
        text = _loose_text(value)
        return "" if text is None else text

class Ring(BaseModel):
    """정규화된 폴리곤 (위도, 경도) 꼭짓점, 3개 이상"""
    model_config = ConfigDict(frozen=True)

    points: Tuple[LatLng, ...]

class Disc(BaseModel):
    """정규화된 원형 영역, 반경은 미터"""
    model_config = ConfigDict(frozen=True)

    center: LatLng
    radius_m: float

class BoundarySet(BaseModel):
    """한 경보의 렌더링/줌용 형상 모음"""
    model_config = ConfigDict(frozen=True)

    rings: List[Ring] = Field(default_factory=list)
    discs: List[Disc] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.rings and not self.discs

class Marker(BaseModel):
    """지도 핀 모델, alert 는 원본 객체를 참조"""
    model_config = ConfigDict(frozen=True)

    id: str
    position: LatLng
    alert: Alert

class ViewportBounds(BaseModel):
    """지도 뷰포트 경계 (도 단위)"""
    model_config = ConfigDict(frozen=True)

    north: float
    south: float
    east: float
    west: float

    @model_validator(mode="after")
    def check_edges(self) -> "ViewportBounds":
        edges = (self.north, self.south, self.east, self.west)
        if not all(math.isfinite(v) for v in edges):
            raise ValueError("viewport edges must be finite")
        if self.south > self.north:
            raise ValueError(f"south({self.south}) > north({self.north})")
        return self

    @property
    def crosses_antimeridian(self) -> bool:
        return self.west > self.east
