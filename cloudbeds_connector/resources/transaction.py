"""
Transaction operations: folio listing, payments, charges and invoices
"""

from enum import Enum
from typing import Any, Dict

from ..contracts import HttpMethod, PaymentMethod, TransactionType
from .base import Handler, Result, choice, list_items, options, require

RESOURCE = "transaction"


class TransactionOperation(str, Enum):
    GET_ALL = "getAll"
    ADD_PAYMENT = "addPayment"
    ADD_CHARGE = "addCharge"
    VOID_TRANSACTION = "voidTransaction"
    GET_INVOICE = "getInvoice"
    EMAIL_INVOICE = "emailInvoice"


OPERATIONS = TransactionOperation


async def get_all(client, params: Dict[str, Any]) -> Result:
    filters = options(params, "filters")
    if filters.get("type"):
        filters["type"] = choice(TransactionType, filters["type"], "type")
    query = {"reservationID": require(params, "reservationID"), **filters}
    return await list_items(client, "/getTransactions", query, params)


async def add_payment(client, params: Dict[str, Any]) -> Result:
    body = {
        "reservationID": require(params, "reservationID"),
        "amount": require(params, "amount"),
        "paymentMethod": choice(PaymentMethod, require(params, "paymentMethod"), "paymentMethod"),
        **options(params, "paymentOptions"),
    }
    return await client.request(HttpMethod.POST, "/postPayment", body)


async def add_charge(client, params: Dict[str, Any]) -> Result:
    body = {
        "reservationID": require(params, "reservationID"),
        "amount": require(params, "amount"),
        "description": require(params, "description"),
        **options(params, "chargeOptions"),
    }
    return await client.request(HttpMethod.POST, "/postCharge", body)


async def void_transaction(client, params: Dict[str, Any]) -> Result:
    body = {"transactionID": require(params, "transactionID")}
    return await client.request(HttpMethod.POST, "/postVoidTransaction", body)


async def get_invoice(client, params: Dict[str, Any]) -> Result:
    return await client.request(
        HttpMethod.GET,
        "/getInvoice",
        query={"reservationID": require(params, "reservationID")},
    )


async def email_invoice(client, params: Dict[str, Any]) -> Result:
    body = {"reservationID": require(params, "reservationID")}
    if params.get("email"):
        body["email"] = params["email"]
    return await client.request(HttpMethod.POST, "/postEmailInvoice", body)


HANDLERS: Dict[TransactionOperation, Handler] = {
    TransactionOperation.GET_ALL: get_all,
    TransactionOperation.ADD_PAYMENT: add_payment,
    TransactionOperation.ADD_CHARGE: add_charge,
    TransactionOperation.VOID_TRANSACTION: void_transaction,
    TransactionOperation.GET_INVOICE: get_invoice,
    TransactionOperation.EMAIL_INVOICE: email_invoice,
}
