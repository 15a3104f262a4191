# models/employee.py
from pydantic import BaseModel
from typing import List

class Employee(BaseModel):
    id: str
    name: str

class EmployeeList(BaseModel):
    employees: List[Employee]
