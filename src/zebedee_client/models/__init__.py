"""Request and response models for every ZEBEDEE endpoint."""

from zebedee_client.models.charges import (
    Charge,
    ChargesData,
    FetchChargesResponse,
    FetchOneChargeResponse,
    InvoiceData,
)
from zebedee_client.models.common import EmailPaymentKind, UnitType, ZbdModel
from zebedee_client.models.email import (
    EmailPaymentData,
    EmailPaymentRequest,
    EmailPaymentResponse,
    EmailPaymentResult,
)
from zebedee_client.models.gamertag import (
    GamertagChargeData,
    GamertagChargeResponse,
    GamertagPayment,
    GamertagPaymentData,
    GamertagPayResponse,
    GamertagTxData,
    GamertagTxResponse,
    GamertagUserIdResponse,
    IdFromGamertagData,
    IdFromGamertagResponse,
)
from zebedee_client.models.internal_transfer import (
    InternalTransfer,
    InternalTransferData,
    InternalTransferResponse,
)
from zebedee_client.models.keysend import (
    Keysend,
    KeysendData,
    KeysendResponse,
    KeysendTx,
    TlvRecord,
)
from zebedee_client.models.ln_address import (
    FetchLnChargeResponse,
    LnAddress,
    LnFetchCharge,
    LnFetchChargeData,
    LnInvoice,
    LnPayerData,
    LnPayment,
    LnSendPaymentData,
    LnValidateData,
    LnValidateMetadata,
    PayLnAddressResponse,
    ValidateLnAddressResponse,
)
from zebedee_client.models.oauth import (
    FetchAccessTokenResponse,
    FetchRefreshBody,
    FetchRefreshResponse,
    FetchTokenBody,
    UserDataResponse,
    UserWalletDataResponse,
    ZBDUserData,
    ZBDUserWalletData,
    ZBDUserWalletDataLimits,
)
from zebedee_client.models.payments import (
    FetchOnePaymentResponse,
    FetchPaymentsResponse,
    Payment,
    PaymentInvoiceResponse,
    PaymentsData,
)
from zebedee_client.models.utilities import (
    BtcToUsdResponse,
    BtcUsdData,
    IpData,
    ProdIpsResponse,
    RegionIpData,
    SupportedIpResponse,
)
from zebedee_client.models.voucher import VoucherData
from zebedee_client.models.wallet import WalletData, WalletInfoResponse
from zebedee_client.models.withdrawal_requests import (
    CreateWithdrawalResponse,
    FetchOneWithdrawalResponse,
    FetchWithdrawalsResponse,
    WithdrawalInvoiceData,
    WithdrawalRequest,
    WithdrawalRequestsData,
)

__all__ = [
    "ZbdModel",
    "UnitType",
    "EmailPaymentKind",
    # Charges
    "Charge",
    "ChargesData",
    "InvoiceData",
    "FetchChargesResponse",
    "FetchOneChargeResponse",
    # Payments
    "Payment",
    "PaymentsData",
    "PaymentInvoiceResponse",
    "FetchPaymentsResponse",
    "FetchOnePaymentResponse",
    # Keysend
    "Keysend",
    "TlvRecord",
    "KeysendData",
    "KeysendTx",
    "KeysendResponse",
    # Email and vouchers
    "EmailPaymentRequest",
    "EmailPaymentData",
    "EmailPaymentResult",
    "EmailPaymentResponse",
    "VoucherData",
    # Gamertag
    "GamertagPayment",
    "GamertagPaymentData",
    "GamertagChargeData",
    "GamertagTxData",
    "IdFromGamertagData",
    "GamertagPayResponse",
    "GamertagChargeResponse",
    "GamertagTxResponse",
    "IdFromGamertagResponse",
    "GamertagUserIdResponse",
    # Lightning Address
    "LnAddress",
    "LnPayment",
    "LnFetchCharge",
    "LnPayerData",
    "LnValidateMetadata",
    "LnValidateData",
    "LnInvoice",
    "LnFetchChargeData",
    "LnSendPaymentData",
    "PayLnAddressResponse",
    "FetchLnChargeResponse",
    "ValidateLnAddressResponse",
    # Internal transfer
    "InternalTransfer",
    "InternalTransferData",
    "InternalTransferResponse",
    # Withdrawal requests
    "WithdrawalRequest",
    "WithdrawalRequestsData",
    "WithdrawalInvoiceData",
    "CreateWithdrawalResponse",
    "FetchWithdrawalsResponse",
    "FetchOneWithdrawalResponse",
    # Wallet
    "WalletData",
    "WalletInfoResponse",
    # Utilities
    "BtcUsdData",
    "IpData",
    "RegionIpData",
    "SupportedIpResponse",
    "ProdIpsResponse",
    "BtcToUsdResponse",
    # Login with ZBD
    "FetchTokenBody",
    "FetchRefreshBody",
    "FetchAccessTokenResponse",
    "FetchRefreshResponse",
    "ZBDUserData",
    "ZBDUserWalletData",
    "ZBDUserWalletDataLimits",
    "UserDataResponse",
    "UserWalletDataResponse",
]
