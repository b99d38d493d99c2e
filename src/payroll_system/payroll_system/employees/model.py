from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import parse_amount


@dataclass(frozen=True)
class Compensation:
    """Numeric pay fields of an employee."""

    basic_salary: float
    rice_subsidy: float
    phone_allowance: float
    clothing_allowance: float
    gross_semi_monthly_rate: float
    hourly_rate: float

    @property
    def total_allowance(self) -> float:
        return self.rice_subsidy + self.phone_allowance + self.clothing_allowance


@dataclass(frozen=True)
class Employee:
    """Employee master record, amounts kept as text as they appear in the export."""

    employee_id: str
    last_name: str
    first_name: str
    birthday: str
    address: str
    phone_number: str
    sss_number: str
    philhealth_number: str
    tin_number: str
    pagibig_number: str
    status: str
    position: str
    immediate_supervisor: str
    basic_salary: str
    rice_subsidy: str
    phone_allowance: str
    clothing_allowance: str
    gross_semi_monthly_rate: str
    hourly_rate: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def compensation(self) -> Compensation:
        """Parse the amount columns; raises ValidationError on a bad value."""
        return Compensation(
            basic_salary=parse_amount(self.basic_salary, "Basic Salary"),
            rice_subsidy=parse_amount(self.rice_subsidy, "Rice Subsidy"),
            phone_allowance=parse_amount(self.phone_allowance, "Phone Allowance"),
            clothing_allowance=parse_amount(self.clothing_allowance, "Clothing Allowance"),
            gross_semi_monthly_rate=parse_amount(self.gross_semi_monthly_rate, "Gross Semi-monthly Rate"),
            hourly_rate=parse_amount(self.hourly_rate, "Hourly Rate"),
        )

    def details(self) -> list[tuple[str, str]]:
        return [
            ("Employee #", self.employee_id),
            ("Last Name", self.last_name),
            ("First Name", self.first_name),
            ("Birthday", self.birthday),
            ("Address", self.address),
            ("Phone Number", self.phone_number),
            ("SSS #", self.sss_number),
            ("Philhealth #", self.philhealth_number),
            ("TIN #", self.tin_number),
            ("Pag-ibig #", self.pagibig_number),
            ("Status", self.status),
            ("Position", self.position),
            ("Immediate Supervisor", self.immediate_supervisor),
            ("Basic Salary", self.basic_salary),
            ("Rice Subsidy", self.rice_subsidy),
            ("Phone Allowance", self.phone_allowance),
            ("Clothing Allowance", self.clothing_allowance),
            ("Gross Semi-monthly Rate", self.gross_semi_monthly_rate),
            ("Hourly Rate", self.hourly_rate),
        ]
