from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel


class AgeRange(str, Enum):
    teen = "13-17"
    young_adult = "18-24"
    adult_25 = "25-34"
    adult_35 = "35-44"
    adult_45 = "45-54"
    adult_55 = "55-64"
    senior = "65+"


class Gender(str, Enum):
    male = "Male"
    female = "Female"
    non_binary = "Non-binary"
    undisclosed = "Prefer not to say"


class Country(str, Enum):
    united_states = "United States"
    canada = "Canada"
    united_kingdom = "United Kingdom"
    australia = "Australia"
    germany = "Germany"
    france = "France"
    spain = "Spain"
    italy = "Italy"
    netherlands = "Netherlands"
    sweden = "Sweden"
    norway = "Norway"
    japan = "Japan"
    south_korea = "South Korea"
    china = "China"
    india = "India"
    brazil = "Brazil"
    mexico = "Mexico"
    argentina = "Argentina"
    south_africa = "South Africa"
    nigeria = "Nigeria"
    egypt = "Egypt"
    other = "Other"


class Demographics(BaseModel):
    age: AgeRange
    gender: Gender
    country: Country

    class Config:
        frozen = True
        use_enum_values = True


FIELD_CHOICES = {
    "age": AgeRange,
    "gender": Gender,
    "country": Country,
}


@dataclass(frozen=True)
class DemographicsForm:
    """Selections made so far; nothing is kept if the form is abandoned."""

    age: Optional[AgeRange] = None
    gender: Optional[Gender] = None
    country: Optional[Country] = None

    def choose(self, field: str, value: Union[str, Enum]) -> "DemographicsForm":
        if field not in FIELD_CHOICES:
            raise KeyError(f"Unknown demographics field: {field}")
        choice = FIELD_CHOICES[field](value)
        return replace(self, **{field: choice})

    @property
    def is_complete(self) -> bool:
        return None not in (self.age, self.gender, self.country)

    def submit(self) -> Optional[Demographics]:
        if not self.is_complete:
            return None
        return Demographics(age=self.age, gender=self.gender, country=self.country)
