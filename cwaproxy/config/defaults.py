"""Static region table: boundary key -> name the CWA API expects."""

from types import MappingProxyType

from cwaproxy.models.region import RegionKey

DEFAULT_REGIONS: MappingProxyType[RegionKey, str] = MappingProxyType({
    RegionKey.TAIPEI: "臺北市",
    RegionKey.NEW_TAIPEI: "新北市",
    RegionKey.KEELUNG: "基隆市",
    RegionKey.TAOYUAN: "桃園市",
    RegionKey.HSINCHU_CITY: "新竹市",
    RegionKey.HSINCHU_COUNTY: "新竹縣",
    RegionKey.MIAOLI: "苗栗縣",
    RegionKey.TAICHUNG: "臺中市",
    RegionKey.CHANGHUA: "彰化縣",
    RegionKey.NANTOU: "南投縣",
    RegionKey.YUNLIN: "雲林縣",
    RegionKey.CHIAYI_CITY: "嘉義市",
    RegionKey.CHIAYI_COUNTY: "嘉義縣",
    RegionKey.TAINAN: "臺南市",
    RegionKey.KAOHSIUNG: "高雄市",
    RegionKey.PINGTUNG: "屏東縣",
    RegionKey.YILAN: "宜蘭縣",
    RegionKey.HUALIEN: "花蓮縣",
    RegionKey.TAITUNG: "臺東縣",
    RegionKey.PENGHU: "澎湖縣",
    RegionKey.KINMEN: "金門縣",
    RegionKey.LIENCHIANG: "連江縣",
})
