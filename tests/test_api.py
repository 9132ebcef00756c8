"""
Сквозные тесты REST API поверх SQLite в памяти.
"""


async def create_skill(client, name):
    response = await client.post("/api/skills", json={"name": name})
    assert response.status_code == 201
    return response.json()


async def create_specialist(client, full_name="Иванова Анна", start="09:00", end="17:00", skill_ids=()):
    response = await client.post("/api/specialists", json={
        "full_name": full_name,
        "available_start": start,
        "available_end": end,
        "skill_ids": list(skill_ids),
    })
    assert response.status_code == 201, response.text
    return response.json()


async def create_interview(client, specialist_id, start, candidate_name="Сидоров Пётр", skill_ids=()):
    return await client.post("/api/interviews", json={
        "candidate_name": candidate_name,
        "interview_time": start,
        "specialist_id": specialist_id,
        "skill_ids": list(skill_ids),
    })


# === Общие параметры ===

async def test_time_endpoint_returns_configuration(client):
    response = await client.get("/api/time")

    assert response.status_code == 200
    assert response.json() == {"hours": 1, "minutes": 30, "min_skill_match_percentage": 80.0}


async def test_healthz(client):
    response = await client.get("/healthz")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


# === Навыки ===

async def test_skills_crud(client):
    sql = await create_skill(client, "SQL")
    await create_skill(client, "Python")

    response = await client.get("/api/skills")
    assert [s["name"] for s in response.json()] == ["Python", "SQL"]

    response = await client.delete(f"/api/skills/{sql['id']}")
    assert response.status_code == 204

    response = await client.get("/api/skills")
    assert [s["name"] for s in response.json()] == ["Python"]


async def test_duplicate_skill_rejected(client):
    await create_skill(client, "Python")

    response = await client.post("/api/skills", json={"name": "Python"})

    assert response.status_code == 409
    assert response.json()["kind"] == "SkillAlreadyExists"


async def test_empty_skill_name_rejected(client):
    response = await client.post("/api/skills", json={"name": "   "})

    assert response.status_code == 422
    assert response.json()["kind"] == "ValidationError"


async def test_delete_missing_skill(client):
    response = await client.delete("/api/skills/999")

    assert response.status_code == 404
    assert response.json()["kind"] == "SkillNotFound"


async def test_deleting_skill_removes_it_from_specialists(client):
    python = await create_skill(client, "Python")
    specialist = await create_specialist(client, skill_ids=[python["id"]])

    await client.delete(f"/api/skills/{python['id']}")

    response = await client.get(f"/api/specialists/{specialist['id']}")
    assert response.json()["skills"] == []


# === Специалисты ===

async def test_create_and_get_specialist(client):
    python = await create_skill(client, "Python")
    specialist = await create_specialist(client, skill_ids=[python["id"]])

    assert specialist["available_start"] == "09:00:00"
    assert specialist["skills_names"] == ["Python"]

    response = await client.get(f"/api/specialists/{specialist['id']}")
    assert response.status_code == 200
    assert response.json()["interviews"] == []


async def test_specialist_list(client):
    await create_specialist(client, "Петров Дмитрий")
    await create_specialist(client, "Иванова Анна")

    response = await client.get("/api/specialists")

    assert [s["full_name"] for s in response.json()] == ["Иванова Анна", "Петров Дмитрий"]


async def test_specialist_requires_valid_window(client):
    response = await client.post("/api/specialists", json={
        "full_name": "Иванова Анна",
        "available_start": "17:00",
        "available_end": "09:00",
    })

    assert response.status_code == 422
    assert response.json()["kind"] == "ValidationError"


async def test_specialist_requires_name(client):
    response = await client.post("/api/specialists", json={
        "available_start": "09:00",
        "available_end": "17:00",
    })

    assert response.status_code == 422
    assert response.json()["kind"] == "ValidationError"


async def test_get_missing_specialist(client):
    response = await client.get("/api/specialists/999")

    assert response.status_code == 404
    assert response.json()["kind"] == "SpecialistNotFound"


async def test_update_specialist_cancels_out_of_range_interviews(client):
    specialist = await create_specialist(client, start="09:00", end="17:00")
    early = (await create_interview(client, specialist["id"], "09:00")).json()
    late = (await create_interview(client, specialist["id"], "14:00")).json()

    response = await client.put(f"/api/specialists/{specialist['id']}", json={
        "full_name": "Иванова Анна",
        "available_start": "12:00",
        "available_end": "17:00",
        "skill_ids": [],
    })

    assert response.status_code == 200
    body = response.json()
    assert body["cancelled_interview_ids"] == [early["id"]]
    assert body["specialist"]["available_start"] == "12:00:00"

    response = await client.get("/api/interviews")
    assert [i["id"] for i in response.json()] == [late["id"]]


async def test_delete_specialist_leaves_interviews_unassigned(client):
    specialist = await create_specialist(client)
    interview = (await create_interview(client, specialist["id"], "10:00")).json()

    response = await client.delete(f"/api/specialists/{specialist['id']}")
    assert response.status_code == 204

    response = await client.get("/api/interviews")
    [stored] = response.json()
    assert stored["id"] == interview["id"]
    assert stored["specialist_id"] is None
    assert stored["specialist_name"] is None


# === Собеседования ===

async def test_create_interview(client):
    python = await create_skill(client, "Python")
    specialist = await create_specialist(client, skill_ids=[python["id"]])

    response = await create_interview(client, specialist["id"], "09:00", skill_ids=[python["id"]])

    assert response.status_code == 201
    body = response.json()
    assert body["interview_time"] == "09:00:00"
    assert body["interview_end"] == "10:30:00"
    assert body["specialist_name"] == "Иванова Анна"
    assert body["skills_names"] == ["Python"]


async def test_create_interview_out_of_hours(client):
    specialist = await create_specialist(client)

    response = await create_interview(client, specialist["id"], "16:00")

    assert response.status_code == 422
    body = response.json()
    assert body["kind"] == "OutOfHours"
    assert body["available_start"] == "09:00"
    assert body["available_end"] == "17:00"


async def test_create_interview_skill_mismatch(client):
    skills = [await create_skill(client, name) for name in ("Python", "SQL", "Go")]
    specialist = await create_specialist(client, skill_ids=[skills[0]["id"]])

    response = await create_interview(client, specialist["id"], "10:00", skill_ids=[s["id"] for s in skills])

    assert response.status_code == 422
    body = response.json()
    assert body["kind"] == "SkillMismatch"
    assert body["percent"] == 33.3
    assert body["threshold"] == 80.0


async def test_create_interview_collision(client):
    specialist = await create_specialist(client)
    first = (await create_interview(client, specialist["id"], "10:00")).json()

    response = await create_interview(client, specialist["id"], "11:00")

    assert response.status_code == 409
    body = response.json()
    assert body["kind"] == "SlotCollision"
    assert body["conflicting_interview_ids"] == [first["id"]]


async def test_back_to_back_interviews(client):
    specialist = await create_specialist(client)

    assert (await create_interview(client, specialist["id"], "10:00")).status_code == 201
    assert (await create_interview(client, specialist["id"], "11:30")).status_code == 201


async def test_create_interview_missing_fields(client):
    specialist = await create_specialist(client)

    response = await client.post("/api/interviews", json={"specialist_id": specialist["id"]})

    assert response.status_code == 422
    assert response.json()["kind"] == "ValidationError"


async def test_create_interview_time_with_offset_rejected(client):
    specialist = await create_specialist(client)

    response = await create_interview(client, specialist["id"], "10:00:00+03:00")

    assert response.status_code == 422
    assert response.json()["kind"] == "ValidationError"
    assert response.json()["field"] == "interview_time"


async def test_specialist_window_with_offset_rejected(client):
    response = await client.post("/api/specialists", json={
        "full_name": "Иванова Анна",
        "available_start": "09:00:00+03:00",
        "available_end": "17:00",
    })

    assert response.status_code == 422
    assert response.json()["kind"] == "ValidationError"


async def test_create_interview_unknown_specialist(client):
    response = await create_interview(client, 999, "10:00")

    assert response.status_code == 404
    assert response.json()["kind"] == "SpecialistNotFound"


async def test_transfer_interview(client):
    first = await create_specialist(client, "Первый")
    second = await create_specialist(client, "Второй", start="12:00", end="20:00")
    interview = (await create_interview(client, first["id"], "10:00")).json()

    response = await client.put(f"/api/interviews/{interview['id']}/transfer", json={
        "new_specialist_id": second["id"],
        "new_time": "18:00",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["specialist_id"] == second["id"]
    assert body["specialist_name"] == "Второй"
    assert body["interview_end"] == "19:30:00"


async def test_transfer_to_same_slot(client):
    specialist = await create_specialist(client)
    interview = (await create_interview(client, specialist["id"], "10:00")).json()

    response = await client.put(f"/api/interviews/{interview['id']}/transfer", json={
        "new_specialist_id": specialist["id"],
        "new_time": "10:00",
    })

    assert response.status_code == 200


async def test_transfer_collision(client):
    first = await create_specialist(client, "Первый")
    second = await create_specialist(client, "Второй")
    interview = (await create_interview(client, first["id"], "10:00")).json()
    await create_interview(client, second["id"], "10:30", candidate_name="Занято")

    response = await client.put(f"/api/interviews/{interview['id']}/transfer", json={
        "new_specialist_id": second["id"],
    })

    assert response.status_code == 409
    assert response.json()["kind"] == "SlotCollision"


async def test_transfer_missing_interview(client):
    specialist = await create_specialist(client)

    response = await client.put("/api/interviews/999/transfer", json={
        "new_specialist_id": specialist["id"],
        "new_time": "10:00",
    })

    assert response.status_code == 404
    assert response.json()["kind"] == "InterviewNotFound"


async def test_transfer_requires_specialist(client):
    response = await client.put("/api/interviews/1/transfer", json={"new_time": "10:00"})

    assert response.status_code == 422
    assert response.json()["kind"] == "ValidationError"


async def test_cancel_interview(client):
    specialist = await create_specialist(client)
    interview = (await create_interview(client, specialist["id"], "10:00")).json()

    response = await client.delete(f"/api/interviews/{interview['id']}")
    assert response.status_code == 204

    response = await client.delete(f"/api/interviews/{interview['id']}")
    assert response.status_code == 404

    response = await client.get(f"/api/specialists/{specialist['id']}")
    assert response.json()["interviews"] == []


async def test_specialist_detail_lists_interviews(client):
    specialist = await create_specialist(client)
    await create_interview(client, specialist["id"], "13:00", candidate_name="Второй")
    await create_interview(client, specialist["id"], "09:00", candidate_name="Первый")

    response = await client.get(f"/api/specialists/{specialist['id']}")

    interviews = response.json()["interviews"]
    assert [i["candidate_name"] for i in interviews] == ["Первый", "Второй"]
    assert interviews[0]["interview_end"] == "10:30:00"
