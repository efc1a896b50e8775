GET_ALL_EMPLOYEES_V1 = "/v1/allEmployees"
EMPLOYEE_BY_ID_V1 = "/v1/employee/{id}"
GET_EMPLOYEE_BY_NAME_V1 = "/v1/employeeName"
ADD_NEW_EMPLOYEE_V1 = "/v1/employee"
ERROR_EMPLOYEE_V1 = "/v1/employee/error"

EMPLOYEE_NAME_QUERY_PARAM = "employee_name"


def employee_by_id_path(employee_id: int) -> str:
    return EMPLOYEE_BY_ID_V1.format(id=employee_id)


def employee_name_params(employee_name: str) -> dict[str, str]:
    return {EMPLOYEE_NAME_QUERY_PARAM: employee_name}
