from masterdom.domain.chat.value_objects.participant_pair import ParticipantPair

__all__ = ["ParticipantPair"]
