from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from risk_radar.domain.errors import UnknownRegionError


class RegionCode(str, Enum):
    INDIA = "IN"
    SINGAPORE = "SG"
    MALAYSIA = "MY"
    UAE = "AE"
    HONG_KONG = "HK"


@dataclass(frozen=True)
class RegionConfig:
    code: RegionCode
    name: str
    flag: str
    currency: str
    laws: tuple[str, ...]
    sources: tuple[str, ...]


REGIONS: dict[RegionCode, RegionConfig] = {
    RegionCode.INDIA: RegionConfig(
        code=RegionCode.INDIA,
        name="India",
        flag="🇮🇳",
        currency="INR",
        laws=("Indian Contract Act 1872", "Data Protection Act 2023", "Companies Act 2013", "GST Rules"),
        sources=("mca.gov.in", "meity.gov.in", "gst.gov.in"),
    ),
    RegionCode.SINGAPORE: RegionConfig(
        code=RegionCode.SINGAPORE,
        name="Singapore",
        flag="🇸🇬",
        currency="SGD",
        laws=("Contract Act (Cap. 23)", "PDPA 2012", "Employment Act (Cap. 91)"),
        sources=("agc.gov.sg", "pdpc.gov.sg", "mom.gov.sg"),
    ),
    RegionCode.MALAYSIA: RegionConfig(
        code=RegionCode.MALAYSIA,
        name="Malaysia",
        flag="🇲🇾",
        currency="MYR",
        laws=("Contract Act 1950", "PDPA 2010", "Employment Act 1955"),
        sources=("agc.gov.my", "pdp.gov.my", "ssm.com.my"),
    ),
    RegionCode.UAE: RegionConfig(
        code=RegionCode.UAE,
        name="UAE",
        flag="🇦🇪",
        currency="AED",
        laws=("UAE Civil Code 1985", "PDPL 2021", "Labor Law 1980", "Sharia Compliance Principles"),
        sources=("moj.gov.ae", "u.ae"),
    ),
    RegionCode.HONG_KONG: RegionConfig(
        code=RegionCode.HONG_KONG,
        name="Hong Kong",
        flag="🇭🇰",
        currency="HKD",
        laws=("Sale of Goods Ordinance", "PDPO (Privacy)", "Employment Ordinance"),
        sources=("doj.gov.hk", "pcpd.org.hk", "labour.gov.hk"),
    ),
}


def get_region(code: RegionCode | str) -> RegionConfig:
    try:
        return REGIONS[RegionCode(code)]
    except (ValueError, KeyError) as exc:
        raise UnknownRegionError(f"Unknown region code: {code!r}") from exc


def list_region_codes() -> list[RegionCode]:
    return list(REGIONS)


def list_regions() -> list[RegionConfig]:
    return list(REGIONS.values())
