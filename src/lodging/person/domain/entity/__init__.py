from .employee import Employee as Employee
from .guest import Guest as Guest
