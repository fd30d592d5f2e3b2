"""Checkpoints, epochs, validators, stakes and system state."""

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, List

from suikit.models.base import JsonModel

MAX_PAGE_LIMIT = 50


def _json(
    key: str, *, default: Any = dataclasses.MISSING, default_factory: Any = dataclasses.MISSING
) -> Any:
    return dataclasses.field(default=default, default_factory=default_factory, metadata={"json": key})


def _text(key: str) -> Any:
    return _json(key, default="")


def _check_limit(limit: int) -> None:
    if not 0 <= limit <= MAX_PAGE_LIMIT:
        raise ValueError(f"limit must be between 0 and {MAX_PAGE_LIMIT}, got {limit}")


@dataclass
class SuiGetCheckpointRequest(JsonModel):
    checkpoint_id: str = _text("id")


@dataclass
class EpochRollingGasCostSummary(JsonModel):
    computation_cost: str = _text("computationCost")
    storage_cost: str = _text("storageCost")
    storage_rebate: str = _text("storageRebate")
    non_refundable_storage_fee: str = _text("nonRefundableStorageFee")


@dataclass
class CheckpointResponse(JsonModel):
    epoch: str = _text("epoch")
    sequence_number: str = _text("sequenceNumber")
    digest: str = _text("digest")
    network_total_transactions: str = _text("networkTotalTransactions")
    previous_digest: str = _text("previousDigest")
    epoch_rolling_gas_cost_summary: EpochRollingGasCostSummary = _json(
        "epochRollingGasCostSummary", default_factory=EpochRollingGasCostSummary
    )
    timestamp_ms: str = _text("timestampMs")
    transactions: List[str] = _json("transactions", default_factory=list)
    checkpoint_commitments: List[Any] = _json("checkpointCommitments", default_factory=list)
    validator_signature: str = _text("validatorSignature")


@dataclass
class SuiGetCheckpointsRequest(JsonModel):
    cursor: Any = _json("cursor", default=None)
    limit: int = _json("limit", default=0)
    descending_order: bool = _json("descendingOrder", default=False)

    def __post_init__(self) -> None:
        _check_limit(self.limit)


@dataclass
class PaginatedCheckpointsResponse(JsonModel):
    data: List[CheckpointResponse] = _json("data", default_factory=list)
    next_cursor: str = _text("nextCursor")
    has_next_page: bool = _json("hasNextPage", default=False)


@dataclass
class SuiXGetCommitteeInfoRequest(JsonModel):
    epoch: str = _text("epoch")


@dataclass
class SuiXGetCommitteeInfoResponse(JsonModel):
    epoch: str = _text("epoch")
    validators: List[List[str]] = _json("validators", default_factory=list)


@dataclass
class SuiXGetStakesRequest(JsonModel):
    owner: str = _text("owner")


@dataclass
class SuiXGetStakesByIdsRequest(JsonModel):
    staked_sui_ids: List[str] = _json("stakedSuiIds", default_factory=list)


@dataclass
class DelegatedStakeInfo(JsonModel):
    staked_sui_id: str = _text("stakedSuiId")
    stake_request_epoch: str = _text("stakeRequestEpoch")
    stake_active_epoch: str = _text("stakeActiveEpoch")
    principal: str = _text("principal")
    status: str = _text("status")
    estimated_reward: str = _text("estimatedReward")


@dataclass
class DelegatedStakesResponse(JsonModel):
    validator_address: str = _text("validatorAddress")
    staking_pool: str = _text("stakingPool")
    stakes: List[DelegatedStakeInfo] = _json("stakes", default_factory=list)


@dataclass
class SuiXGetEpochsRequest(JsonModel):
    cursor: Any = _json("cursor", default=None)
    limit: int = _json("limit", default=0)
    descending_order: bool = _json("descendingOrder", default=False)

    def __post_init__(self) -> None:
        _check_limit(self.limit)


@dataclass
class SuiValidatorSummary(JsonModel):
    sui_address: str = _text("suiAddress")
    protocol_pubkey_bytes: str = _text("protocolPubkeyBytes")
    network_pubkey_bytes: str = _text("networkPubkeyBytes")
    worker_pubkey_bytes: str = _text("workerPubkeyBytes")
    proof_of_possession_bytes: str = _text("proofOfPossessionBytes")
    operation_cap_id: str = _text("operationCapId")
    name: str = _text("name")
    description: str = _text("description")
    image_url: str = _text("imageUrl")
    project_url: str = _text("projectUrl")
    p2p_address: str = _text("p2pAddress")
    net_address: str = _text("netAddress")
    primary_address: str = _text("primaryAddress")
    worker_address: str = _text("workerAddress")
    next_epoch_protocol_pubkey_bytes: str = _text("nextEpochProtocolPubkeyBytes")
    next_epoch_proof_of_possession: str = _text("nextEpochProofOfPossession")
    next_epoch_network_pubkey_bytes: str = _text("nextEpochNetworkPubkeyBytes")
    next_epoch_worker_pubkey_bytes: str = _text("nextEpochWorkerPubkeyBytes")
    next_epoch_net_address: str = _text("nextEpochNetAddress")
    next_epoch_p2p_address: str = _text("nextEpochP2pAddress")
    next_epoch_primary_address: str = _text("nextEpochPrimaryAddress")
    next_epoch_worker_address: str = _text("nextEpochWorkerAddress")
    voting_power: str = _text("votingPower")
    gas_price: str = _text("gasPrice")
    commission_rate: str = _text("commissionRate")
    next_epoch_stake: str = _text("nextEpochStake")
    next_epoch_gas_price: str = _text("nextEpochGasPrice")
    next_epoch_commission_rate: str = _text("nextEpochCommissionRate")
    staking_pool_id: str = _text("stakingPoolId")
    staking_pool_activation_epoch: str = _text("stakingPoolActivationEpoch")
    staking_pool_deactivation_epoch: str = _text("stakingPoolDeactivationEpoch")
    staking_pool_sui_balance: str = _text("stakingPoolSuiBalance")
    rewards_pool: str = _text("rewardsPool")
    pool_token_balance: str = _text("poolTokenBalance")
    pending_stake: str = _text("pendingStake")
    pending_pool_token_withdraw: str = _text("pendingPoolTokenWithdraw")
    pending_total_sui_withdraw: str = _text("pendingTotalSuiWithdraw")
    exchange_rates_id: str = _text("exchangeRatesId")
    exchange_rates_size: str = _text("exchangeRatesSize")


@dataclass
class EndOfEpochInfo(JsonModel):
    last_checkpoint_id: str = _text("lastCheckpointId")
    epoch_end_timestamp: str = _text("epochEndTimestamp")
    protocol_version: str = _text("protocolVersion")
    reference_gas_price: str = _text("referenceGasPrice")
    total_stake: str = _text("totalStake")
    storage_fund_reinvestment: str = _text("storageFundReinvestment")
    storage_charge: str = _text("storageCharge")
    storage_rebate: str = _text("storageRebate")
    storage_fund_balance: str = _text("storageFundBalance")
    stake_subsidy_amount: str = _text("stakeSubsidyAmount")
    total_gas_fees: str = _text("totalGasFees")
    total_stake_rewards_distributed: str = _text("totalStakeRewardsDistributed")
    leftover_storage_fund_inflow: str = _text("leftoverStorageFundInflow")


@dataclass
class EpochInfo(JsonModel):
    epoch: str = _text("epoch")
    validators: List[SuiValidatorSummary] = _json("validators", default_factory=list)
    epoch_total_transactions: str = _text("epochTotalTransactions")
    first_checkpoint_id: str = _text("firstCheckpointId")
    epoch_start_timestamp: str = _text("epochStartTimestamp")
    end_of_epoch_info: EndOfEpochInfo = _json("endOfEpochInfo", default_factory=EndOfEpochInfo)


@dataclass
class PaginatedEpochInfoResponse(JsonModel):
    data: List[EpochInfo] = _json("data", default_factory=list)
    next_cursor: str = _text("nextCursor")
    has_next_page: bool = _json("hasNextPage", default=False)


@dataclass
class SuiSystemStateSummary(JsonModel):
    epoch: str = _text("epoch")
    protocol_version: str = _text("protocolVersion")
    system_state_version: str = _text("systemStateVersion")
    storage_fund_total_object_storage_rebates: str = _text("storageFundTotalObjectStorageRebates")
    storage_fund_non_refundable_balance: str = _text("storageFundNonRefundableBalance")
    reference_gas_price: str = _text("referenceGasPrice")
    safe_mode: bool = _json("safeMode", default=False)
    safe_mode_storage_rewards: str = _text("safeModeStorageRewards")
    safe_mode_computation_rewards: str = _text("safeModeComputationRewards")
    safe_mode_storage_rebates: str = _text("safeModeStorageRebates")
    safe_mode_non_refundable_storage_fee: str = _text("safeModeNonRefundableStorageFee")
    epoch_start_timestamp_ms: str = _text("epochStartTimestampMs")
    epoch_duration_ms: str = _text("epochDurationMs")
    stake_subsidy_start_epoch: str = _text("stakeSubsidyStartEpoch")
    max_validator_count: str = _text("maxValidatorCount")
    min_validator_joining_stake: str = _text("minValidatorJoiningStake")
    validator_low_stake_threshold: str = _text("validatorLowStakeThreshold")
    validator_very_low_stake_threshold: str = _text("validatorVeryLowStakeThreshold")
    validator_low_stake_grace_period: str = _text("validatorLowStakeGracePeriod")
    stake_subsidy_balance: str = _text("stakeSubsidyBalance")
    stake_subsidy_distribution_counter: str = _text("stakeSubsidyDistributionCounter")
    stake_subsidy_current_distribution_amount: str = _text("stakeSubsidyCurrentDistributionAmount")
    stake_subsidy_period_length: str = _text("stakeSubsidyPeriodLength")
    stake_subsidy_decrease_rate: int = _json("stakeSubsidyDecreaseRate", default=0)
    total_stake: str = _text("totalStake")
    active_validators: List[SuiValidatorSummary] = _json("activeValidators", default_factory=list)
    pending_active_validators_id: str = _text("pendingActiveValidatorsId")
    pending_active_validators_size: str = _text("pendingActiveValidatorsSize")
    pending_removals: List[str] = _json("pendingRemovals", default_factory=list)
    staking_pool_mappings_id: str = _text("stakingPoolMappingsId")
    staking_pool_mappings_size: str = _text("stakingPoolMappingsSize")
    inactive_pools_id: str = _text("inactivePoolsId")
    inactive_pools_size: str = _text("inactivePoolsSize")
    validator_candidates_id: str = _text("validatorCandidatesId")
    validator_candidates_size: str = _text("validatorCandidatesSize")
    at_risk_validators: List[Any] = _json("atRiskValidators", default_factory=list)
    validator_report_records: List[List[Any]] = _json(
        "validatorReportRecords", default_factory=list
    )


@dataclass
class Apy(JsonModel):
    address: str = _text("address")
    apy: float = _json("apy", default=0.0)


@dataclass
class ValidatorsApy(JsonModel):
    apys: List[Apy] = _json("apys", default_factory=list)
    epoch: str = _text("epoch")


@dataclass
class SuiGetProtocolConfigRequest(JsonModel):
    version: str = _text("version")


@dataclass
class ProtocolConfigResponse(JsonModel):
    min_supported_protocol_version: str = _text("minSupportedProtocolVersion")
    max_supported_protocol_version: str = _text("maxSupportedProtocolVersion")
    protocol_version: str = _text("protocolVersion")
    feature_flags: Dict[str, bool] = _json("featureFlags", default_factory=dict)
    attributes: Dict[str, Dict[str, str]] = _json("attributes", default_factory=dict)