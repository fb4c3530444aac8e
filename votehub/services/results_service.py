# votehub/services/results_service.py
from typing import Iterable, List

def calculate_results(event, votes: Iterable, group_weights: dict | None = None) -> dict:
    """
    이벤트 결과 집계 (DB 접근 없음)

    - 프로젝트별: 총점, 평균, 기준별 점수, 그룹별 평균, 가중 최종 점수
    - 그룹별: 가중치, 총점, 투표 수, 투표자 수
    - group_weights: {group_id: weight} 가 있으면 저장된 가중치 대신 사용
    """

    group_weights = group_weights or {}

    # 프로젝트 초기화
    project_results = {}
    for project in event.projects:
        project_results[project.id] = {
            "id": project.id,
            "name": project.name,
            "description": project.description,
            "team_members": list(project.team_members or []),
            "total_score": 0,
            "average_score": 0,
            "vote_count": 0,
            "criteria_scores": {},
            "group_averages": {},  # {그룹 이름: 평균}
            "final_score": 0,
            "rank": 0
        }

    # 그룹 초기화
    group_results = {}
    group_voters = {}
    for group in event.groups:
        group_results[group.id] = {
            "id": group.id,
            "name": group.name,
            "weight": group_weights.get(group.id, group.weight),
            "total_score": 0,
            "vote_count": 0,
            "voter_count": 0,
            "rank": 0
        }
        group_voters[group.id] = set()

    # {project_id: {group_id: [합계, 개수]}}
    project_group_scores = {
        pid: {gid: [0, 0] for gid in group_results}
        for pid in project_results
    }

    # 점수 집계 (삭제된 프로젝트/그룹 투표는 무시)
    for vote in votes:
        project = project_results.get(vote.project_id)
        group = group_results.get(vote.group_id)
        if project is None or group is None:
            continue

        vote_total = 0
        for criterion, score in vote.scores.items():
            criterion_data = project["criteria_scores"].setdefault(criterion, {"total": 0, "count": 0})
            criterion_data["total"] += score
            criterion_data["count"] += 1
            vote_total += score

        project["vote_count"] += 1
        project["total_score"] += vote_total

        group["vote_count"] += 1
        group["total_score"] += vote_total
        group_voters[vote.group_id].add(vote.voter_session_id)

        pair = project_group_scores[vote.project_id][vote.group_id]
        pair[0] += vote_total
        pair[1] += 1

    for group_id, voters in group_voters.items():
        group_results[group_id]["voter_count"] = len(voters)

    # 평균 및 가중 최종 점수
    for project_id, project in project_results.items():
        if project["vote_count"] > 0:
            project["average_score"] = project["total_score"] / project["vote_count"]
            for criterion_data in project["criteria_scores"].values():
                criterion_data["average"] = criterion_data["total"] / criterion_data["count"]

        weighted_sum = 0
        total_weight = 0
        for group_id, group in group_results.items():
            total, count = project_group_scores[project_id][group_id]
            average = total / count if count > 0 else 0
            project["group_averages"][group["name"]] = average
            weighted_sum += average * group["weight"]
            total_weight += group["weight"]

        project["final_score"] = weighted_sum / total_weight if total_weight > 0 else 0

    # 정렬 (동점은 입력 순서 유지) 후 순위 부여
    sorted_projects = sorted(project_results.values(), key=lambda p: p["final_score"], reverse=True)
    for index, project in enumerate(sorted_projects):
        project["rank"] = index + 1

    sorted_groups = sorted(group_results.values(), key=lambda g: g["total_score"], reverse=True)
    for index, group in enumerate(sorted_groups):
        group["rank"] = index + 1

    return {
        "projects": sorted_projects,
        "groups": sorted_groups
    }

def summarize_votes(votes: List) -> dict:
    """전체 투표 수 / 투표자 수"""
    return {
        "total_votes": len(votes),
        "total_voters": len({vote.voter_session_id for vote in votes})
    }
