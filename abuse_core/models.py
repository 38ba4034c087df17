from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from typing import List, Optional, Union


class RequestModel(BaseModel):
    """Base for request schemas: no type coercion, unknown keys dropped."""
    model_config = ConfigDict(strict=True, extra="ignore")


class ResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class AbuseTicketCreate(RequestModel):
    target: Optional[str] = Field(None, description="The brand/company the abuse is targeting. ie: brand name/bank name")
    type: Optional[str] = Field(None, description="The type of abuse being reported.")
    info: Optional[str] = Field(None, description="Additional information that may assist the abuse investigator. ie: server logs or email headers/body for SPAM")
    infoUrl: Optional[str] = Field(None, description="Reporter URL if housing additional information that may assist the abuse investigator")
    intentional: Optional[bool] = Field(None, description="Do you believe this is intentional abuse by the domain holder?")
    proxy: Optional[str] = Field(None, description="The Proxy information required to view the abuse being reported. ie: Specific IP used, or country of IP viewing from")
    source: Optional[str] = Field(None, description="The URL or IP where live abuse content is located at. ie: https://www.example.com/bad_stuff/bad.php")


class AbuseTicketQuery(RequestModel):
    """Filters for listing abuse tickets. Field order is query-string order."""
    type: Optional[str] = Field(None, description="The type of abuse.")
    closed: Optional[bool] = Field(None, description="Is this abuse ticket closed?")
    sourceDomainOrIp: Optional[str] = Field(None, description="The domain name or ip address the abuse originated from")
    target: Optional[str] = Field(None, description="The brand/company the abuse is targeting. ie: brand name/bank name")
    createdStart: Optional[str] = Field(None, description="The earliest abuse ticket creation date to pull abuse tickets for")
    createdEnd: Optional[str] = Field(None, description="The latest abuse ticket creation date to pull abuse tickets for")
    limit: Optional[Union[StrictInt, StrictFloat]] = Field(None, description="Number of abuse ticket numbers to return.")
    offset: Optional[Union[StrictInt, StrictFloat]] = Field(None, description="The earliest result set record number to pull abuse tickets for")


class AbuseTicket(ResponseModel):
    ticketId: Optional[str] = Field(None, description="Abuse ticket ID")
    reporter: Optional[str] = Field(None, description="The shopper id of the person who reported the suspected abuse")
    domainIp: Optional[str] = Field(None, description="The domain or IP the suspected abuse was reported against")
    source: Optional[str] = Field(None, description="The single URL or IP the suspected abuse was reported against")
    target: Optional[str] = Field(None, description="The company the suspected abuse is targeting")
    type: Optional[str] = Field(None, description="The type of abuse being reported")
    closed: Optional[bool] = Field(None, description="Is this abuse ticket closed?")
    createdAt: Optional[str] = Field(None, description="The date the abuse ticket was created")
    closedAt: Optional[str] = Field(None, description="The date the abuse ticket was closed")


class AbuseTicketId(ResponseModel):
    u_number: Optional[str] = Field(None, description="Abuse ticket ID")


class Pagination(ResponseModel):
    total: Optional[int] = Field(None, description="Number of records available")
    first: Optional[str] = Field(None, description="Optional link to first list of results")
    last: Optional[str] = Field(None, description="Optional link to last list of results")
    next: Optional[str] = Field(None, description="Optional link to next list of results")
    previous: Optional[str] = Field(None, description="Optional link to previous list of results")


class AbuseTicketList(ResponseModel):
    pagination: Optional[Pagination] = None
    ticketIds: List[str] = Field(default_factory=list, description="A list of abuse ticket ids originated by this reporter.")


class ErrorField(ResponseModel):
    code: str
    message: Optional[str] = None
    path: str
    pathRelated: Optional[str] = None


class Error(ResponseModel):
    """Error envelope returned by the abuse API.

    ``stack`` is only populated by development and test environments.
    """
    code: str
    message: Optional[str] = None
    fields: Optional[List[ErrorField]] = None
    stack: Optional[List[str]] = None
