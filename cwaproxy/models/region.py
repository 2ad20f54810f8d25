"""Region identifiers accepted at the service boundary."""

from enum import StrEnum


class RegionKey(StrEnum):
    TAIPEI = "taipei"
    NEW_TAIPEI = "newtaipei"
    KEELUNG = "keelung"
    TAOYUAN = "taoyuan"
    HSINCHU_CITY = "hsinchu_city"
    HSINCHU_COUNTY = "hsinchu_county"
    MIAOLI = "miaoli"
    TAICHUNG = "taichung"
    CHANGHUA = "changhua"
    NANTOU = "nantou"
    YUNLIN = "yunlin"
    CHIAYI_CITY = "chiayi_city"
    CHIAYI_COUNTY = "chiayi_county"
    TAINAN = "tainan"
    KAOHSIUNG = "kaohsiung"
    PINGTUNG = "pingtung"
    YILAN = "yilan"
    HUALIEN = "hualien"
    TAITUNG = "taitung"
    PENGHU = "penghu"
    KINMEN = "kinmen"
    LIENCHIANG = "lienchiang"
